"""Shared test fixtures."""

import pytest

from pegon.converter import PegonConverter
from pegon.glyphs import build_table
from pegon.lexicon import Lexicon
from pegon.segmenter import Segmenter
from pegon.vowels import VowelResolver


@pytest.fixture
def table():
    return build_table()


@pytest.fixture
def segmenter(table):
    return Segmenter(table)


@pytest.fixture
def resolver(table):
    return VowelResolver(table)


@pytest.fixture
def lexicon():
    """Small in-memory lexicon, independent of the bundled data file."""
    return Lexicon.from_mapping({
        "assalamualaikum": "السلام عليكم",
        "Bismillah": "بسم الله",
        "kitab": "كتاب",
    }, source="test")


@pytest.fixture
def converter():
    """Rule-only converter (empty lexicon)."""
    return PegonConverter()


@pytest.fixture
def lexicon_converter(lexicon):
    return PegonConverter(lexicon=lexicon)


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        import requests

        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Stands in for requests.Session: replays queued responses or errors."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.headers = {}
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse
