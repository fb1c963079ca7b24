"""Unit tests for factory functions in groupie/main.py."""

from __future__ import annotations

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from groupie.config.settings import Settings
from groupie.main import _build_all, create_app
from groupie.providers.groupie_api_provider import GroupieAPIProvider
from groupie.services.aggregation_service import ArtistAggregationService


def _config(base_url: str = "http://upstream.local/api") -> dict:
    return {
        "upstream": {
            "base_url": base_url,
            "paths": {"artists": "/artists", "locations": "/locations"},
        }
    }


class TestBuildAll:
    @pytest.mark.asyncio
    async def test_components(self) -> None:
        components = _build_all(_config())
        try:
            assert isinstance(components["http_client"], httpx.AsyncClient)
            assert isinstance(components["provider"], GroupieAPIProvider)
            assert isinstance(components["aggregation_service"], ArtistAggregationService)
        finally:
            await components["http_client"].aclose()


class TestCreateApp:
    def test_returns_fastapi_with_both_pages(self) -> None:
        application = create_app(Settings(_env_file=None))

        assert isinstance(application, FastAPI)
        # Included routers are not guaranteed to expose ``.path``; resolve by name.
        assert application.url_path_for("list_artists") == "/"
        assert application.url_path_for("artist_detail") == "/artist"

    def test_lifespan_populates_state(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir("/")  # no config/config.yaml here; built-in paths apply
        application = create_app(Settings(_env_file=None, api_base_url="http://upstream.local/api"))

        with TestClient(application):
            assert isinstance(application.state.aggregation_service, ArtistAggregationService)
            assert isinstance(application.state.provider, GroupieAPIProvider)
