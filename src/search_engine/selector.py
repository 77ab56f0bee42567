"""
Result selector - ordering and top-K truncation of ranked documents.

Ordering:
    1. relevance descending
    2. if |relevance_a - relevance_b| < RELEVANCE_EPSILON, rating descending

The epsilon is a fixed absolute tolerance (1e-6) so that float noise from
different summation orders never reorders results.
"""

from functools import cmp_to_key
from typing import List

from .document import RankedDocument

RELEVANCE_EPSILON = 1e-6

MAX_RESULT_DOCUMENT_COUNT = 5


def compare_ranked_documents(lhs: RankedDocument, rhs: RankedDocument) -> int:
    """
    Pairwise comparator: negative if lhs ranks before rhs.

    Examples:
        >>> a = RankedDocument(id=1, relevance=0.5, rating=1)
        >>> b = RankedDocument(id=2, relevance=0.5 + 1e-9, rating=7)
        >>> compare_ranked_documents(a, b)  # tie on relevance, b has higher rating
        1
    """
    if abs(lhs.relevance - rhs.relevance) < RELEVANCE_EPSILON:
        if lhs.rating == rhs.rating:
            return 0
        return -1 if lhs.rating > rhs.rating else 1

    return -1 if lhs.relevance > rhs.relevance else 1


def select_top_documents(
    documents: List[RankedDocument],
    limit: int = MAX_RESULT_DOCUMENT_COUNT
) -> List[RankedDocument]:
    """
    Sort ranked documents and keep the first `limit`.

    Args:
        documents: Unordered ranker output
        limit: Maximum number of results (default: 5)

    Returns:
        New list, best first, len <= limit
    """
    ordered = sorted(documents, key=cmp_to_key(compare_ranked_documents))
    return ordered[:limit]
