"""
Inverted index builder - term frequencies and postings.

Each document contributes, per distinct term, a normalized term frequency:

    tf(term, doc) = count(term in doc) / |doc|

where |doc| is the token count after stop-word removal. Every occurrence adds
1/|doc|, so the tf values of one document sum to 1.0 (within float tolerance).

Structure:
    {
        "term1": {doc_id: tf, doc_id: tf, ...},
        "term2": {...},
    }
"""

import logging
from collections import defaultdict
from typing import Dict, List, Mapping

logger = logging.getLogger(__name__)


def compute_term_frequencies(words: List[str]) -> Dict[str, float]:
    """
    Compute normalized term frequencies for one document.

    Args:
        words: Document tokens with stop words already removed

    Returns:
        Dict {term: tf}, tf in (0, 1]

    Raises:
        ZeroDivisionError: if words is empty (callers validate first)

    Example:
        >>> compute_term_frequencies(["fluffy", "cat", "fluffy", "tail"])
        {'fluffy': 0.5, 'cat': 0.25, 'tail': 0.25}
    """
    inv_word_count = 1.0 / len(words)

    # Accumulate per occurrence rather than count * inv_word_count
    term_frequencies = defaultdict(float)
    for word in words:
        term_frequencies[word] += inv_word_count

    return dict(term_frequencies)


class InvertedIndex:
    """
    Maps every indexed term to its postings {doc_id: tf}.

    Also keeps the reverse view {doc_id: {term: tf}} so that per-document
    frequencies can be returned without scanning all terms.
    """

    def __init__(self):
        self._postings: Dict[str, Dict[int, float]] = defaultdict(dict)
        self._document_terms: Dict[int, Dict[str, float]] = {}

    def add_postings(self, document_id: int, term_frequencies: Mapping[str, float]) -> None:
        """
        Store postings of one document.

        Frequencies are added to any existing value for (term, doc_id).

        Args:
            document_id: Document the frequencies belong to
            term_frequencies: Output of compute_term_frequencies()
        """
        document_terms = self._document_terms.setdefault(document_id, {})

        for term, tf in term_frequencies.items():
            postings = self._postings[term]
            postings[document_id] = postings.get(document_id, 0.0) + tf
            document_terms[term] = postings[document_id]

        logger.debug(
            f"Indexed document {document_id}: {len(term_frequencies)} unique terms, "
            f"{len(self._postings)} terms in index"
        )

    def __contains__(self, term: str) -> bool:
        return term in self._postings

    def postings(self, term: str) -> Mapping[int, float]:
        """Postings {doc_id: tf} of a term, empty for unknown terms."""
        return self._postings.get(term, {})

    def document_frequency(self, term: str) -> int:
        """Number of documents containing the term."""
        return len(self._postings.get(term, {}))

    def has_posting(self, term: str, document_id: int) -> bool:
        return document_id in self._postings.get(term, {})

    def word_frequencies(self, document_id: int) -> Dict[str, float]:
        """Copy of {term: tf} for a document, empty if never indexed."""
        return dict(self._document_terms.get(document_id, {}))
