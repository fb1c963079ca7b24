"""Shared pytest fixtures for the Groupie Tracker test suite.

Upstream is simulated with ``httpx.MockTransport``: the :class:`FakeUpstream`
handler serves canned JSON per path, records every request it receives and
can be told to fail a path at the connection level.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from groupie.providers.groupie_api_provider import GroupieAPIProvider
from groupie.services.aggregation_service import ArtistAggregationService

BASE_URL = "https://upstream.test/api"


class FakeUpstream:
    """In-memory stand-in for the Groupie Trackers API."""

    def __init__(self, routes: dict[str, Any]) -> None:
        # path (relative to BASE_URL) -> JSON body, or (status, raw text) tuple
        self.routes = dict(routes)
        self.failing: set[str] = set()
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        if path in self.failing:
            raise httpx.ConnectError("Connection refused", request=request)
        if path not in self.routes:
            # Same body upstream's router sends for unknown paths.
            return httpx.Response(404, text="404 page not found")
        body = self.routes[path]
        if isinstance(body, tuple):
            status, text = body
            return httpx.Response(status, text=text)
        return httpx.Response(200, json=body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def paths(self) -> list[str]:
        return [r.url.path.removeprefix("/api") for r in self.requests]


# ---------------------------------------------------------------------------
# Upstream payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def queen_payload() -> dict[str, Any]:
    return {
        "id": 1,
        "name": "Queen",
        "image": "https://upstream.test/api/images/queen.jpeg",
        "members": ["Freddie Mercury", "Brian May", "John Deacon", "Roger Taylor"],
        "creationDate": 1970,
        "firstAlbum": "14-12-1973",
    }


@pytest.fixture
def upstream_routes(queen_payload: dict[str, Any]) -> dict[str, Any]:
    """Routes for the single-artist scenario used across the suite."""
    return {
        "/artists": [queen_payload],
        "/artists/1": queen_payload,
        "/locations": {"index": [{"id": 1, "locations": ["london", "paris"]}]},
        "/dates": {"index": [{"id": 1, "dates": ["1975-01-01"]}]},
        "/relation": {"index": [{"id": 1, "datesLocations": {"london": ["1975-01-01"]}}]},
    }


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------


@pytest.fixture
def upstream(upstream_routes: dict[str, Any]) -> FakeUpstream:
    return FakeUpstream(upstream_routes)


@pytest.fixture
def make_upstream() -> Callable[[dict[str, Any]], FakeUpstream]:
    """Factory for tests that need a differently shaped upstream."""
    return FakeUpstream


@pytest.fixture
def provider(upstream: FakeUpstream) -> GroupieAPIProvider:
    return GroupieAPIProvider(http_client=upstream.client(), base_url=BASE_URL)


@pytest.fixture
def aggregation_service(provider: GroupieAPIProvider) -> ArtistAggregationService:
    return ArtistAggregationService(provider=provider)
