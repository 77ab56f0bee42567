"""
Search Server - FastAPI application over the in-memory TF-IDF engine

HTTP surface for the search engine:
- Documents are added with an id, text, status and ratings
- Queries support plus/minus terms and status / min-rating filters
- Match reports which query terms a given document contains

Concurrency:
- One SearchServer instance per application lifespan
- All endpoints are async and never await while touching the engine,
  so every engine call runs to completion on the event loop
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Dict, List, Optional

from .config import load_environment, load_settings

# Load .env.local / .env before reading settings
load_environment()
settings = load_settings()

# Configure logging: console (brief) + file (detailed)
from .logging_config import setup_logging

setup_logging(
    log_file=settings.log_file,
    console_level=settings.console_log_level,
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)


from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .search_engine import (
    DocumentNotFoundError,
    DocumentStatus,
    DuplicateDocumentIdError,
    InvalidDocumentError,
    InvalidQueryError,
    SearchServer,
)
from .search_engine.scorer import DocumentPredicate

# Version tracking
APP_VERSION = "0.1.0"
APP_START_TIME = datetime.utcnow().isoformat() + "Z"

# Global instance, created in lifespan
search_server: Optional[SearchServer] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create a fresh engine for the application lifetime"""
    global search_server

    logger.info(f"Initializing search engine (max_results={settings.max_result_document_count})...")
    search_server = SearchServer(
        stop_words=settings.stop_words,
        max_results=settings.max_result_document_count,
    )
    logger.info(f"Search engine initialized with {len(search_server.stop_words)} stop words")

    yield

    # Shutdown: state is in-memory only
    logger.info(f"Shutting down with {search_server.get_document_count()} documents indexed")
    search_server = None


# FastAPI app
app = FastAPI(
    title="Search Server API",
    description="In-memory TF-IDF document search with plus/minus terms and status/rating filters",
    version=APP_VERSION,
    lifespan=lifespan,
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float
    document_count: int


class StopWordsRequest(BaseModel):
    text: str = Field(..., description="Space-separated stop words", min_length=1)


class StopWordsResponse(BaseModel):
    stop_word_count: int


class DocumentAddRequest(BaseModel):
    document_id: int = Field(..., description="Caller-chosen unique document id")
    text: str = Field(..., description="Document text (space-separated words)", min_length=1)
    status: DocumentStatus = Field(default=DocumentStatus.ACTUAL, description="Document status")
    ratings: List[int] = Field(default_factory=list, description="Integer ratings, averaged toward zero")

    class Config:
        json_schema_extra = {
            "example": {
                "document_id": 1,
                "text": "fluffy cat fluffy tail",
                "status": "ACTUAL",
                "ratings": [7, 2, 7],
            }
        }


class DocumentRecordResponse(BaseModel):
    document_id: int
    rating: int
    status: DocumentStatus
    message: str


class DocumentListResponse(BaseModel):
    total: int
    document_ids: List[int]


class DocumentCountResponse(BaseModel):
    count: int


class WordFrequenciesResponse(BaseModel):
    document_id: int
    word_frequencies: Dict[str, float]


class QueryRequest(BaseModel):
    query: str = Field(..., description="Query terms, minus terms prefixed with '-'", min_length=1)
    status: Optional[DocumentStatus] = Field(
        default=None,
        description="Only documents with this status (default: ACTUAL unless min_rating is given)"
    )
    min_rating: Optional[int] = Field(
        default=None,
        description="Only documents with average rating >= min_rating"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "query": "fluffy groomed cat -paw",
                "status": "ACTUAL",
            }
        }


class QueryResultItem(BaseModel):
    document_id: int
    relevance: float
    rating: int


class QueryResponse(BaseModel):
    query: str
    results: List[QueryResultItem]
    total: int


class MatchRequest(BaseModel):
    query: str = Field(..., description="Query terms, minus terms prefixed with '-'", min_length=1)


class MatchResponse(BaseModel):
    document_id: int
    matched_terms: List[str]
    status: DocumentStatus


def build_predicate(request: QueryRequest) -> Optional[DocumentPredicate]:
    """
    Turn request filters into an engine predicate.

    Returns None when no filter is given (engine default: status ACTUAL).
    A status alone is handled by the engine's status filter; min_rating
    needs a predicate, optionally combined with the status.
    """
    if request.min_rating is None:
        return None

    min_rating = request.min_rating
    wanted_status = request.status

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        if wanted_status is not None and document_status != wanted_status:
            return False
        return rating >= min_rating

    return predicate


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "Search Server API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    start_time = datetime.fromisoformat(APP_START_TIME.rstrip('Z'))
    uptime = (datetime.utcnow() - start_time).total_seconds()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME,
        uptime_seconds=round(uptime, 2),
        document_count=search_server.get_document_count(),
    )


@app.post("/v1/stop-words", response_model=StopWordsResponse)
async def set_stop_words(request: StopWordsRequest):
    """Add stop words (affects documents added afterwards and all queries)"""
    search_server.set_stop_words(request.text)
    logger.info(f"Stop words updated: {len(search_server.stop_words)} total")
    return StopWordsResponse(stop_word_count=len(search_server.stop_words))


@app.post("/v1/documents", response_model=DocumentRecordResponse, status_code=status.HTTP_201_CREATED)
async def add_document(request: DocumentAddRequest):
    """Index a document"""
    try:
        record = search_server.add_document(
            request.document_id,
            request.text,
            request.status,
            request.ratings,
        )
    except DuplicateDocumentIdError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except InvalidDocumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    logger.info(f"Document added: ID={record.id}, rating={record.rating}, status={record.status.value}")

    return DocumentRecordResponse(
        document_id=record.id,
        rating=record.rating,
        status=record.status,
        message=f"Document {record.id} indexed",
    )


@app.get("/v1/documents", response_model=DocumentListResponse)
async def list_documents():
    """List ids of all indexed documents (ascending)"""
    document_ids = search_server.document_ids()
    return DocumentListResponse(total=len(document_ids), document_ids=document_ids)


@app.get("/v1/documents/count", response_model=DocumentCountResponse)
async def document_count():
    """Number of indexed documents"""
    return DocumentCountResponse(count=search_server.get_document_count())


@app.get("/v1/documents/{document_id}/word-frequencies", response_model=WordFrequenciesResponse)
async def word_frequencies(document_id: int):
    """Term frequencies of a document"""
    if document_id not in search_server:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Document {document_id} not found",
        )

    return WordFrequenciesResponse(
        document_id=document_id,
        word_frequencies=search_server.get_word_frequencies(document_id),
    )


@app.post("/v1/query", response_model=QueryResponse)
async def query_documents(request: QueryRequest):
    """
    Ranked TF-IDF search.

    Filters:
    - none: status ACTUAL
    - status: exact status
    - min_rating (+ optional status): rating threshold predicate
    """
    predicate = build_predicate(request)
    if predicate is not None:
        filter_by = predicate
    else:
        filter_by = request.status or DocumentStatus.ACTUAL

    try:
        results = search_server.find_top_documents(request.query, filter_by)
    except InvalidQueryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    logger.info(f"Query {request.query!r}: {len(results)} results")

    return QueryResponse(
        query=request.query,
        results=[
            QueryResultItem(document_id=doc.id, relevance=doc.relevance, rating=doc.rating)
            for doc in results
        ],
        total=len(results),
    )


@app.post("/v1/documents/{document_id}/match", response_model=MatchResponse)
async def match_document(document_id: int, request: MatchRequest):
    """Plus terms of the query found in the document (empty if a minus term matches)"""
    try:
        matched_terms, document_status = search_server.match_document(request.query, document_id)
    except DocumentNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except InvalidQueryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return MatchResponse(
        document_id=document_id,
        matched_terms=matched_terms,
        status=document_status,
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=True,  # Development only
    )
