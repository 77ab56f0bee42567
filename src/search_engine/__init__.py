"""
In-memory TF-IDF search engine.

Indexes short text documents and answers ranked keyword queries with
plus/minus term semantics and attribute filtering (status, rating, or any
predicate over them).

Components:
- tokenizer: Space-delimited tokenization
- stop_words: Union-only stop-word set
- document_store: Per-document rating and status
- index_builder: Term frequencies and the inverted index
- query_parser: Plus/minus term sets from a raw query
- scorer: TF-IDF relevance with predicate filtering and minus-term exclusion
- selector: Relevance/rating ordering and top-K truncation
- server: SearchServer, the single owning facade over all of the above
"""

from .document import DocumentRecord, DocumentStatus, RankedDocument, compute_average_rating
from .errors import (
    DocumentNotFoundError,
    DuplicateDocumentIdError,
    InvalidDocumentError,
    InvalidQueryError,
    SearchServerError,
)
from .query_parser import Query, QueryParser
from .selector import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_EPSILON, select_top_documents
from .server import SearchServer, status_predicate
from .tokenizer import split_into_words

__all__ = [
    "SearchServer",
    "DocumentStatus",
    "DocumentRecord",
    "RankedDocument",
    "Query",
    "QueryParser",
    "split_into_words",
    "select_top_documents",
    "status_predicate",
    "compute_average_rating",
    "MAX_RESULT_DOCUMENT_COUNT",
    "RELEVANCE_EPSILON",
    "SearchServerError",
    "InvalidDocumentError",
    "DuplicateDocumentIdError",
    "InvalidQueryError",
    "DocumentNotFoundError",
]
