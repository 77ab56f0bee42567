"""
TF-IDF ranker.

Relevance of a document for a parsed query:

    relevance(doc) = Σ tf(term, doc) × idf(term)    over plus terms in doc

    idf(term) = ln(N / df(term))

Where:
    tf = normalized term frequency stored in the inverted index
    N = total number of documents in the store
    df = number of documents containing the term

Filtering:
    - Plus-term postings only count for documents accepted by the predicate
      predicate(document_id, status, rating) -> bool
    - Documents containing any minus term are removed unconditionally,
      whatever the predicate says and however high their relevance is
    - Terms missing from the index contribute nothing (not an error)

The output is unordered; ordering and top-K truncation live in selector.py.
"""

import logging
import math
from collections import defaultdict
from typing import Callable, Dict, List

from .document import DocumentStatus, RankedDocument
from .document_store import DocumentStore
from .index_builder import InvertedIndex
from .query_parser import Query

logger = logging.getLogger(__name__)

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


class TfIdfRanker:
    """Computes per-document TF-IDF relevance over an index and a store."""

    def __init__(self, index: InvertedIndex, store: DocumentStore):
        self.index = index
        self.store = store

    def inverse_document_frequency(self, term: str) -> float:
        """
        idf(term) = ln(N / df(term)).

        Only defined for indexed terms: callers check `term in index` first.
        """
        return math.log(len(self.store) / self.index.document_frequency(term))

    def rank(self, query: Query, predicate: DocumentPredicate) -> List[RankedDocument]:
        """
        Rank all documents matching the query.

        Args:
            query: Parsed query
            predicate: Filter over (document_id, status, rating)

        Returns:
            One RankedDocument per surviving document, in no particular order
        """
        document_to_relevance: Dict[int, float] = defaultdict(float)

        for term in query.plus_terms:
            if term not in self.index:
                continue

            idf = self.inverse_document_frequency(term)
            for document_id, tf in self.index.postings(term).items():
                record = self.store.get(document_id)
                if predicate(document_id, record.status, record.rating):
                    document_to_relevance[document_id] += tf * idf

        for term in query.minus_terms:
            if term not in self.index:
                continue

            for document_id in self.index.postings(term):
                document_to_relevance.pop(document_id, None)

        ranked = [
            RankedDocument(
                id=document_id,
                relevance=relevance,
                rating=self.store.get(document_id).rating,
            )
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

        logger.debug(
            f"Ranked {len(ranked)} documents "
            f"(plus={len(query.plus_terms)}, minus={len(query.minus_terms)})"
        )

        return ranked
