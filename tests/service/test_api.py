"""Tests for the HTTP API."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from realiser_core.contracts import RequestProcessor
from realiser_core.realiser import Realiser
from realiser_service.api import app
from realiser_service.api.deps import get_processor


@pytest.fixture
def client(settings):
    processor = RequestProcessor(realiser=Realiser(settings=settings))
    app.dependency_overrides[get_processor] = lambda: processor
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_realise(client, dog_barks_payload) -> None:
    response = client.post("/api/realise", json=json.loads(dog_barks_payload))
    assert response.status_code == 200
    assert response.json() == {"realisation": "The dog barks."}


def test_realise_with_html(client) -> None:
    body = {
        "formatter": "html",
        "document": {
            "kind": "document",
            "category": "LIST",
            "children": [
                {"kind": "document", "category": "LIST_ITEM", "children": [{"kind": "string", "text": "tea"}]}
            ],
        },
    }
    response = client.post("/api/realise", json=body)
    assert response.json() == {"realisation": "<ul><li>tea</li></ul>"}


def test_noop(client) -> None:
    response = client.post("/api/realise", json={"op": "noop"})
    assert response.json() == {"realisation": "OK"}


def test_malformed_tree(client, malformed_tree_payload) -> None:
    response = client.post("/api/realise", json=json.loads(malformed_tree_payload))
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error_type"] == "MALFORMED_TREE"
    assert detail["message"] == "Element has no category"
    assert detail["kind"] == "ListElement"
    assert detail["category"] is None


def test_start_recording_without_directory(client) -> None:
    response = client.post("/api/realise", json={"op": "start_recording"})
    assert response.status_code == 422
    assert response.json()["detail"]["error_type"] == "REQUEST_SCHEMA"


def test_schema_violation(client) -> None:
    response = client.post("/api/realise", json={"op": "realise"})
    assert response.status_code == 422

    response = client.post("/api/realise", json={"document": {"kind": "word", "base": "x", "category": "GERUND"}})
    assert response.status_code == 422
