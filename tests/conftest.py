"""Pytest configuration and fixtures for the fragments client tests."""

from __future__ import annotations

import pytest

from fragments.client import Client
from fragments.exceptions import TransportError
from fragments.tpf.querystring import build_url

ENDPOINT = "https://tpf.example.org/core"


def nt(*statements: tuple[str, str, str]) -> str:
    """Render (s, p, o) tuples as an n-triples body."""
    return "\n".join(f"{s} {p} {o} ." for s, p, o in statements) + "\n"


def page_url(subject=None, predicate=None, obj=None, page=1) -> str:
    return build_url(ENDPOINT, subject, predicate, obj, page)


class FakeTransport:
    """Serves canned bodies keyed by URL and records every request.

    Unknown URLs answer with an empty body, like a fragment with no matches.
    URLs listed in ``failures`` raise TransportError.
    """

    def __init__(self) -> None:
        self.pages: dict[str, str] = {}
        self.failures: set[str] = set()
        self.requests: list[tuple[str, dict[str, str]]] = []

    def serve(self, body: str, subject=None, predicate=None, obj=None, page=1) -> str:
        url = page_url(subject, predicate, obj, page)
        self.pages[url] = body
        return url

    def fail(self, subject=None, predicate=None, obj=None, page=1) -> str:
        url = page_url(subject, predicate, obj, page)
        self.failures.add(url)
        return url

    async def fetch(self, url: str, headers: dict[str, str]) -> str:
        self.requests.append((url, dict(headers)))
        if url in self.failures:
            raise TransportError("HTTP 503: Service Unavailable", context=url)
        return self.pages.get(url, "")

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.requests]


class FakeClock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(transport, clock):
    return Client(ENDPOINT, transport, clock=clock)
