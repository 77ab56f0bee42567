"""
Document store - per-document metadata (rating, status) keyed by id.
"""

import logging
from typing import Dict, List, Optional

from .document import DocumentRecord

logger = logging.getLogger(__name__)


class DocumentStore:
    """Holds immutable DocumentRecord objects; the owner of all metadata."""

    def __init__(self):
        self._records: Dict[int, DocumentRecord] = {}

    def add(self, record: DocumentRecord) -> None:
        # Uniqueness is checked by SearchServer before any write happens
        self._records[record.id] = record
        logger.debug(f"Stored document {record.id}: rating={record.rating}, status={record.status.value}")

    def get(self, document_id: int) -> Optional[DocumentRecord]:
        return self._records.get(document_id)

    def __contains__(self, document_id: int) -> bool:
        return document_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def document_ids(self) -> List[int]:
        """All stored ids in ascending order."""
        return sorted(self._records)
