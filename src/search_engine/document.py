"""
Data model of the search engine: document status, stored record, ranked result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class DocumentStatus(str, Enum):
    """Lifecycle status a caller attaches to a document"""
    ACTUAL = "ACTUAL"
    IRRELEVANT = "IRRELEVANT"
    BANNED = "BANNED"
    REMOVED = "REMOVED"


@dataclass(frozen=True)
class DocumentRecord:
    """Per-document metadata kept by the DocumentStore"""
    id: int
    rating: int                 # Average of caller ratings, truncated toward zero
    status: DocumentStatus


@dataclass(frozen=True)
class RankedDocument:
    """Single search result"""
    id: int
    relevance: float            # Sum of tf * idf over matched plus terms
    rating: int


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Average rating with integer division truncating toward zero.

    Python's // floors, so the sign is handled separately:
    (5 - 12 + 2 + 1) / 4 = -1, and -7 / 2 gives -3 rather than -4.

    Args:
        ratings: Caller-supplied integer ratings (may be empty)

    Returns:
        Truncated mean, or 0 for no ratings
    """
    if not ratings:
        return 0

    total = sum(ratings)
    count = len(ratings)
    average = abs(total) // count
    return -average if total < 0 else average
