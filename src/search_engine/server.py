"""
SearchServer - the single owning object of all engine state.

Write path:
    add_document -> tokenize -> drop stop words -> term frequencies
                 -> InvertedIndex + DocumentStore

Read path:
    find_top_documents -> QueryParser -> TfIdfRanker -> select_top_documents
    match_document     -> QueryParser -> InvertedIndex

No internal locking: a multi-threaded host must serialize add_document /
set_stop_words against readers itself. Every write validates first and
mutates last, so a failed call leaves the state untouched.
"""

import logging
from typing import Dict, Iterator, List, Sequence, Tuple, Union

from .document import DocumentRecord, DocumentStatus, RankedDocument, compute_average_rating
from .document_store import DocumentStore
from .errors import DocumentNotFoundError, DuplicateDocumentIdError, InvalidDocumentError
from .index_builder import InvertedIndex, compute_term_frequencies
from .query_parser import QueryParser
from .scorer import DocumentPredicate, TfIdfRanker
from .selector import MAX_RESULT_DOCUMENT_COUNT, select_top_documents
from .stop_words import StopWordSet
from .tokenizer import split_into_words

logger = logging.getLogger(__name__)

DocumentFilter = Union[DocumentStatus, str, DocumentPredicate]


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting documents with exactly the given status."""
    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status
    return predicate


class SearchServer:
    """
    In-memory TF-IDF search engine with plus/minus query terms.

    Usage:
        server = SearchServer(stop_words="and in on")
        server.add_document(0, "white cat and fashionable collar", DocumentStatus.ACTUAL, [8, -3])
        server.find_top_documents("fluffy cat -collar")
        server.find_top_documents("cat", DocumentStatus.BANNED)
        server.find_top_documents("cat", lambda doc_id, status, rating: rating > 0)
    """

    def __init__(self, stop_words: str = "", max_results: int = MAX_RESULT_DOCUMENT_COUNT):
        """
        Args:
            stop_words: Initial space-separated stop words
            max_results: Top-K truncation applied to every search
        """
        self.stop_words = StopWordSet(stop_words)
        self.index = InvertedIndex()
        self.store = DocumentStore()
        self.query_parser = QueryParser(self.stop_words)
        self.ranker = TfIdfRanker(self.index, self.store)
        self.max_results = max_results

    def set_stop_words(self, text: str) -> None:
        """Add stop words; affects documents added later and all later queries."""
        self.stop_words.configure(text)
        logger.debug(f"Stop words configured: {len(self.stop_words)} total")

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = ()
    ) -> DocumentRecord:
        """
        Index a document and store its metadata.

        Args:
            document_id: Caller-chosen unique id
            text: Document text
            status: Document status
            ratings: Integer ratings, averaged with truncation toward zero

        Returns:
            The stored DocumentRecord

        Raises:
            DuplicateDocumentIdError: id already added
            InvalidDocumentError: no words left after stop-word removal
        """
        if document_id in self.store:
            logger.warning(f"Rejected document {document_id}: id already exists")
            raise DuplicateDocumentIdError(document_id)

        words = self.stop_words.filter(split_into_words(text))
        if not words:
            logger.warning(f"Rejected document {document_id}: no indexable words")
            raise InvalidDocumentError(document_id)

        term_frequencies = compute_term_frequencies(words)
        record = DocumentRecord(
            id=document_id,
            rating=compute_average_rating(ratings),
            status=DocumentStatus(status),
        )

        self.index.add_postings(document_id, term_frequencies)
        self.store.add(record)

        logger.debug(f"Added document {document_id}: {len(words)} words, {len(term_frequencies)} unique terms")
        return record

    def find_top_documents(
        self,
        raw_query: str,
        filter_by: DocumentFilter = DocumentStatus.ACTUAL
    ) -> List[RankedDocument]:
        """
        Search and return the best documents, at most max_results.

        Args:
            raw_query: Query text, minus terms prefixed with "-"
            filter_by: A DocumentStatus or its string value (exact match,
                default ACTUAL), or a predicate(document_id, status, rating) -> bool

        Returns:
            RankedDocument list ordered by relevance, ties by rating

        Raises:
            InvalidQueryError: malformed minus term
            ValueError: unknown status value
        """
        if isinstance(filter_by, str):
            predicate = status_predicate(DocumentStatus(filter_by))
        else:
            predicate = filter_by

        query = self.query_parser.parse(raw_query)
        if query.is_empty():
            logger.debug(f"Query {raw_query!r} has no terms after stop-word removal")
            return []

        matched = self.ranker.rank(query, predicate)
        results = select_top_documents(matched, self.max_results)

        logger.debug(f"Query {raw_query!r}: {len(matched)} matched, {len(results)} returned")
        return results

    def get_document_count(self) -> int:
        return len(self.store)

    def __len__(self) -> int:
        return self.get_document_count()

    def document_ids(self) -> List[int]:
        """Ids of all added documents, ascending."""
        return self.store.document_ids()

    def __iter__(self) -> Iterator[int]:
        return iter(self.document_ids())

    def __contains__(self, document_id: int) -> bool:
        return document_id in self.store

    def get_word_frequencies(self, document_id: int) -> Dict[str, float]:
        """Term frequencies {term: tf} of a document; empty dict for unknown ids."""
        return self.index.word_frequencies(document_id)

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        Report which plus terms of a query a document contains.

        If the document contains any minus term the matched list is empty.

        Args:
            raw_query: Query text
            document_id: Id of an added document

        Returns:
            (sorted matched terms, document status)

        Raises:
            DocumentNotFoundError: id was never added
            InvalidQueryError: malformed minus term
        """
        record = self.store.get(document_id)
        if record is None:
            raise DocumentNotFoundError(document_id)

        query = self.query_parser.parse(raw_query)

        if any(self.index.has_posting(term, document_id) for term in query.minus_terms):
            return [], record.status

        matched_words = sorted(
            term for term in query.plus_terms
            if self.index.has_posting(term, document_id)
        )
        return matched_words, record.status
