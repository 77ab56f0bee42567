"""Fixtures for E2E tests: the HTTP service driven in-process"""

import pytest
from fastapi.testclient import TestClient

from src.main import app


@pytest.fixture
def client():
    """
    TestClient with lifespan events.

    Entering the context runs the app lifespan, so every test gets a fresh,
    empty SearchServer.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def reference_client(client, reference_documents):
    """Client whose engine holds the reference corpus (stop word "и")"""
    response = client.post("/v1/stop-words", json={"text": "и"})
    assert response.status_code == 200

    for document_id, text, status, ratings in reference_documents:
        response = client.post("/v1/documents", json={
            "document_id": document_id,
            "text": text,
            "status": status.value,
            "ratings": ratings,
        })
        assert response.status_code == 201, response.text

    return client
