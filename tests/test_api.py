"""
Tests for the REST API.

Uses FastAPI's TestClient against a fresh app.
"""

import sys
from pathlib import Path

# Add src to path so imports work without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from fastapi.testclient import TestClient

from tdtxt.api import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


class TestParseRoute:
    def test_parse(self, client):
        resp = client.post("/api/tasks/parse", json={"line": "x (A) 2020-01-02 2020-01-01 call +mum @phone"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["record"] == {
            "state": "done",
            "priority": "A",
            "created": "2020-01-01",
            "completed": "2020-01-02",
            "description": "call +mum @phone",
        }
        assert data["line"] == "x (A) 2020-01-02 2020-01-01 call +mum @phone"
        assert data["components"] == [
            {"kind": "plain", "text": "call", "span": [0, 4]},
            {"kind": "project", "text": "+mum", "span": [5, 9]},
            {"kind": "context", "text": "@phone", "span": [10, 16]},
        ]

    def test_parse_error(self, client):
        resp = client.post("/api/tasks/parse", json={"line": "2021-02-30 note"})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["kind"] == "INVALID_DATE"
        assert detail["span"] == [0, 10]
        assert detail["message"]

    def test_parse_empty(self, client):
        resp = client.post("/api/tasks/parse", json={"line": ""})
        assert resp.status_code == 422
        assert resp.json()["detail"]["kind"] == "UNEXPECTED_END"

    def test_missing_body_field(self, client):
        resp = client.post("/api/tasks/parse", json={})
        assert resp.status_code == 422


class TestFormatRoute:
    def test_format(self, client):
        resp = client.post(
            "/api/tasks/format",
            json={"state": "done", "priority": "C", "created": "2020-01-01", "description": "foo"},
        )
        assert resp.status_code == 200
        assert resp.json() == {"line": "x (C) 2020-01-01 foo"}

    def test_format_invalid_record(self, client):
        resp = client.post("/api/tasks/format", json={"priority": "c", "description": "foo"})
        assert resp.status_code == 422

    def test_format_description_reads_as_header(self, client):
        resp = client.post("/api/tasks/format", json={"description": "(A) foo"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["kind"] == "INVALID_TASK"


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
