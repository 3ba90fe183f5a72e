"""API tests for the glossary routes (FastAPI TestClient)."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from backend.app.main import app

pytestmark = pytest.mark.api


@pytest.fixture
def client():
    """FastAPI test client fixture."""
    return TestClient(app)


WIRE_ENTRY = {
    "id": 1,
    "srcLang": "en",
    "sourceReference": "r1",
    "termsCount": 2,
    "glossaryTerms": [
        {"content": "cat", "locale": "en", "comment": ""},
        {"content": "chat", "locale": "fr", "comment": "c"},
    ],
}


def _editable(trans: str = "chat", **overrides) -> dict:
    data = {
        "id": 1,
        "pos": " noun ",
        "description": "",
        "termsCount": 1,
        "srcTerm": {"content": "cat", "locale": "en", "comment": "", "reference": "r1"},
        "transTerm": {"content": trans, "locale": "fr", "comment": " c "},
        "status": {"isSaving": True},
    }
    data.update(overrides)
    return data


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


class TestEntryRoutes:

    def test_editable(self, client):
        resp = client.post("/api/glossary/entries/editable", params={"trans_locale": "fr"}, json=WIRE_ENTRY)
        assert resp.status_code == 200
        body = resp.json()
        assert body["srcTerm"]["content"] == "cat"
        assert body["srcTerm"]["reference"] == "r1"
        assert body["transTerm"]["content"] == "chat"
        assert body["termsCount"] == 1
        assert body["status"]["isSrcValid"] is True

    def test_editable_placeholder_translation(self, client):
        resp = client.post("/api/glossary/entries/editable", params={"trans_locale": "de"}, json=WIRE_ENTRY)
        assert resp.json()["transTerm"] == {
            "content": "",
            "locale": "de",
            "comment": "",
            "lastModifiedDate": "",
            "lastModifiedBy": "",
        }

    def test_editable_missing_source_term(self, client):
        resp = client.post(
            "/api/glossary/entries/editable",
            params={"trans_locale": "fr"},
            json={**WIRE_ENTRY, "srcLang": "ja"},
        )
        assert resp.status_code == 422
        assert "missing source term" in resp.json()["detail"]

    def test_editable_requires_locale(self, client):
        resp = client.post("/api/glossary/entries/editable", json=WIRE_ENTRY)
        assert resp.status_code == 422

    def test_wire(self, client):
        resp = client.post("/api/glossary/entries/wire", json=_editable())
        assert resp.status_code == 200
        body = resp.json()
        assert body["pos"] == "noun"
        assert body["srcLang"] == "en"
        assert body["sourceReference"] == "r1"
        assert body["glossaryTerms"][1] == {"content": "chat", "locale": "fr", "comment": "c"}
        assert "status" not in body

    def test_save_payload(self, client):
        resp = client.post("/api/glossary/entries/save-payload", json=_editable())
        assert resp.status_code == 200
        payload = json.loads(resp.json()["payload"])
        assert len(payload) == 1
        assert "status" not in payload[0]
        assert payload[0]["pos"] == "noun"

    def test_status(self, client):
        resp = client.post(
            "/api/glossary/entries/status",
            json={"current": _editable(trans="chaton"), "original": _editable()},
        )
        assert resp.status_code == 200
        assert resp.json() == {
            "isSrcModified": False,
            "isTransModified": True,
            "isSrcValid": True,
            "canUpdateTransComment": True,
            "isSaving": True,
        }

    def test_status_null_content_equals_empty(self, client):
        current = _editable(trans="")
        current["transTerm"]["content"] = None
        resp = client.post(
            "/api/glossary/entries/status",
            json={"current": current, "original": _editable(trans="")},
        )
        assert resp.status_code == 200
        assert resp.json()["isTransModified"] is False
        assert resp.json()["canUpdateTransComment"] is False

    def test_editable_null_content(self, client):
        body = {
            **WIRE_ENTRY,
            "glossaryTerms": [
                {"content": "cat", "locale": "en"},
                {"content": None, "locale": "fr"},
            ],
        }
        resp = client.post("/api/glossary/entries/editable", params={"trans_locale": "fr"}, json=body)
        assert resp.status_code == 200
        assert resp.json()["transTerm"]["content"] == ""

    def test_editable_out_of_range_date(self, client):
        body = {
            **WIRE_ENTRY,
            "glossaryTerms": [
                {"content": "cat", "locale": "en", "lastModifiedDate": 99999999999999999999},
                {"content": "chat", "locale": "fr"},
            ],
        }
        resp = client.post("/api/glossary/entries/editable", params={"trans_locale": "fr"}, json=body)
        assert resp.status_code == 200
        assert resp.json()["srcTerm"]["lastModifiedDate"] == "99999999999999999999"

    def test_status_without_original(self, client):
        resp = client.post("/api/glossary/entries/status", json={"current": _editable()})
        assert resp.json()["isSaving"] is False
        assert resp.json()["isSrcValid"] is True


class TestSortRoutes:

    def test_parse_default(self, client):
        assert client.get("/api/glossary/sort").json() == {"src_content": True}

    def test_parse_descending(self, client):
        assert client.get("/api/glossary/sort", params={"sort": "-pos"}).json() == {"pos": False}

    def test_serialize(self, client):
        resp = client.post("/api/glossary/sort", json={"trans_content": False})
        assert resp.json() == {"sort": "-trans_content"}
