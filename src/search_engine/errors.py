"""
Error taxonomy of the search engine.

All errors are precondition violations detected at the SearchServer API
boundary. Nothing here is transient, so nothing is retried.

The HTTP layer (src/main.py) maps them to status codes:
- InvalidDocumentError, InvalidQueryError -> 400
- DuplicateDocumentIdError -> 409
- DocumentNotFoundError -> 404
"""


class SearchServerError(Exception):
    """Base class for all search engine errors"""


class InvalidDocumentError(SearchServerError, ValueError):
    """Document has no indexable words once stop words are removed"""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(
            f"Document {document_id} has no words left after stop-word removal"
        )


class DuplicateDocumentIdError(SearchServerError, ValueError):
    """Document id is already present in the store"""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(f"Document {document_id} already exists")


class InvalidQueryError(SearchServerError, ValueError):
    """Query contains a malformed minus term ("-" alone or "--word")"""

    def __init__(self, term: str):
        self.term = term
        super().__init__(f"Invalid query term: {term!r}")


class DocumentNotFoundError(SearchServerError, KeyError):
    """Document id was never added"""

    def __init__(self, document_id: int):
        self.document_id = document_id
        super().__init__(document_id)

    def __str__(self) -> str:
        # KeyError.__str__ would return repr of the id only
        return f"Document {self.document_id} not found"
