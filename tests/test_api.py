"""Tests for the HTTP service (api/main.py)."""

import pytest
from fastapi.testclient import TestClient

import api.main as api_main
from api.main import COMMON_PHRASES, ERROR_MESSAGE, PLACEHOLDER_MESSAGE, app
from pegon.converter import ConversionError, PegonConverter
from pegon.lexicon import Lexicon


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


@pytest.fixture
def reference():
    return PegonConverter(lexicon=Lexicon.bundled())


# ── info ──────────────────────────────────────────────────────────────────────

def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_health(client):
    data = client.get("/health").json()
    assert data["status"] == "healthy"
    assert data["converter_loaded"] is True
    assert data["lexicon_size"] > 0


def test_examples(client, reference):
    examples = client.get("/examples").json()["examples"]
    assert [item["latin"] for item in examples] == COMMON_PHRASES
    assert examples[1]["pegon"] == reference.to_pegon("Apa kabar?")


def test_lexicon_lookup(client):
    response = client.get("/lexicon/Bismillah")
    assert response.status_code == 200
    assert response.json() == {"word": "bismillah", "pegon": "بسم الله"}


def test_lexicon_lookup_missing(client):
    assert client.get("/lexicon/kabar").status_code == 404


# ── /convert ──────────────────────────────────────────────────────────────────

def test_convert_latin(client, reference):
    data = client.post("/convert", json={"text": "apa kabar?"}).json()
    assert data["result"] == reference.to_pegon("apa kabar?")
    assert data["direction"] == "latin-to-pegon"
    assert data["harakah"] is False
    assert data["message"] is None


def test_convert_detects_pegon(client):
    data = client.post("/convert", json={"text": "كيتا"}).json()
    assert data["direction"] == "pegon-to-latin"
    assert data["result"] == "kita"


def test_convert_with_harakah(client, reference):
    data = client.post("/convert", json={"text": "kita", "harakah": True}).json()
    assert data["result"] == reference.to_pegon("kita", harakah=True)
    assert data["harakah"] is True


@pytest.mark.parametrize("payload", [{}, {"text": ""}, {"text": "   "}, {"text": None}])
def test_convert_empty_returns_placeholder(client, payload):
    data = client.post("/convert", json=payload).json()
    assert data["result"] == ""
    assert data["message"] == PLACEHOLDER_MESSAGE


def test_convert_bad_direction(client):
    response = client.post("/convert", json={"text": "apa", "direction": "sideways"})
    assert response.status_code == 422


def test_convert_error_is_retryable_message(client, monkeypatch):
    def boom(text, direction=None, harakah=None):
        raise ConversionError("boom")

    monkeypatch.setattr(api_main.converter, "convert", boom)
    response = client.post("/convert", json={"text": "apa"})
    assert response.status_code == 500
    assert response.json()["detail"] == ERROR_MESSAGE


def test_convert_without_converter(client, monkeypatch):
    monkeypatch.setattr(api_main, "converter", None)
    assert client.post("/convert", json={"text": "apa"}).status_code == 503


# ── quick endpoints ───────────────────────────────────────────────────────────

def test_convert_pegon(client, reference):
    data = client.post("/convert/pegon", json={"text": "terima kasih"}).json()
    assert data["result"] == reference.to_pegon("terima kasih")
    assert data["direction"] == "latin-to-pegon"


def test_convert_latin_endpoint(client):
    data = client.post("/convert/latin", json={"text": "كيتا"}).json()
    assert data["result"] == "kita"
    assert data["direction"] == "pegon-to-latin"


# ── batch ─────────────────────────────────────────────────────────────────────

def test_batch(client, reference):
    data = client.post("/convert/batch", json={"texts": ["apa kabar?", "كيتا"]}).json()
    assert data == {"results": [reference.to_pegon("apa kabar?"), "kita"], "count": 2}


def test_batch_fixed_direction(client):
    data = client.post(
        "/convert/batch",
        json={"texts": ["كيتا"], "direction": "pegon-to-latin"},
    ).json()
    assert data["results"] == ["kita"]


@pytest.mark.parametrize("texts", [[], ["a"] * 101])
def test_batch_size_limits(client, texts):
    assert client.post("/convert/batch", json={"texts": texts}).status_code == 422


def test_batch_limit_follows_config(client):
    limit = api_main.config.api.max_batch_size
    assert client.post("/convert/batch", json={"texts": ["a"] * limit}).status_code == 200
    response = client.post("/convert/batch", json={"texts": ["a"] * (limit + 1)})
    assert response.status_code == 422


def test_batch_is_all_or_nothing(client, monkeypatch):
    calls = []

    def flaky(text, direction=None, harakah=None):
        calls.append(text)
        if len(calls) == 2:
            raise ConversionError("boom")
        return text

    monkeypatch.setattr(api_main.converter, "convert", flaky)
    response = client.post("/convert/batch", json={"texts": ["a", "b", "c"]})
    assert response.status_code == 500
    assert "results" not in response.json()
