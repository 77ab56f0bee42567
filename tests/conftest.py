"""Pytest configuration shared by unit and E2E tests"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path for src imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set env vars BEFORE importing src.main
# main.py reads settings and configures logging at module level
os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "search-server-tests" / "search-server.log"))
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("MAX_RESULT_DOCUMENT_COUNT", "5")
os.environ.setdefault("STOP_WORDS", "")

from src.search_engine import DocumentStatus, SearchServer


# Reference corpus: stop word "и", documents 0-4
REFERENCE_STOP_WORDS = "и"

REFERENCE_DOCUMENTS = [
    (0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3]),
    (1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7]),
    (2, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [5, -12, 2, 1]),
    (3, "ухоженный скворец евгений", DocumentStatus.BANNED, [9]),
    (4, "маленький пёс огромная лапа", DocumentStatus.ACTUAL, [7, -3, 3]),
]

REFERENCE_QUERY = "пушистый ухоженный кот -лапа"


@pytest.fixture
def reference_documents():
    """(document_id, text, status, ratings) tuples of the reference corpus"""
    return list(REFERENCE_DOCUMENTS)


@pytest.fixture
def reference_server():
    """SearchServer loaded with the reference corpus"""
    server = SearchServer(stop_words=REFERENCE_STOP_WORDS)
    for document_id, text, status, ratings in REFERENCE_DOCUMENTS:
        server.add_document(document_id, text, status, ratings)
    return server


@pytest.fixture
def reference_query():
    return REFERENCE_QUERY
