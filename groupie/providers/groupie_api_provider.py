"""Groupie Trackers REST API provider.

Implements :class:`IArtistAPIProvider` by composing :class:`HTTPFetcher` and
:func:`decode_payload` against one URL per resource.  Base URL and resource
paths are injected at construction so tests can point the provider at an
``httpx.MockTransport``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
import structlog

from groupie.interfaces.artist_api_provider import IArtistAPIProvider
from groupie.models.artist import Artist, DateIndex, LocationIndex, RelationIndex
from groupie.providers.http_fetcher import HTTPFetcher
from groupie.utils.decoding import decode_payload
from groupie.utils.errors import GroupieTrackerError
from groupie.utils.logging import get_logger

_T = TypeVar("_T")

_logger: structlog.BoundLogger = get_logger(__name__)


@dataclass(frozen=True)
class ResourcePaths:
    """Path of each upstream resource, relative to the base URL."""

    artists: str = "/artists"
    locations: str = "/locations"
    dates: str = "/dates"
    relation: str = "/relation"

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> ResourcePaths:
        """Build from the ``upstream.paths`` section of the loaded config."""
        paths = config.get("upstream", {}).get("paths", {})
        return cls(**{key: value for key, value in paths.items() if key in cls.__dataclass_fields__})


class GroupieAPIProvider(IArtistAPIProvider):
    """Read-only client for the artists/locations/dates/relation API.

    Each accessor re-fetches from the network; nothing is cached between
    calls or between requests.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        paths: ResourcePaths | None = None,
    ) -> None:
        self._fetcher = HTTPFetcher(http_client)
        self._base_url = base_url.rstrip("/")
        self._paths = paths or ResourcePaths()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return self._base_url + path

    async def _get(self, url: str, target: Any, resource: str) -> Any:
        """Fetch *url* and decode it into *target*, logging failures by resource."""
        try:
            payload = await self._fetcher.fetch(url, resource=resource)
            return decode_payload(target, payload, resource=resource)
        except GroupieTrackerError as exc:
            _logger.error(
                "upstream_resource_failed",
                resource=resource,
                url=url,
                error_type=type(exc).__name__,
                error=exc.message,
            )
            raise

    # ------------------------------------------------------------------
    # IArtistAPIProvider implementation
    # ------------------------------------------------------------------

    async def get_artists(self) -> list[Artist]:
        artists: list[Artist] = await self._get(
            self._url(self._paths.artists), list[Artist], "artists"
        )
        _logger.debug("artists_fetched", count=len(artists))
        return artists

    async def get_artist(self, artist_id: str) -> Artist:
        url = self._url(f"{self._paths.artists}/{quote(artist_id, safe='')}")
        return await self._get(url, Artist, "artist")

    async def get_locations(self) -> LocationIndex:
        return await self._get(self._url(self._paths.locations), LocationIndex, "locations")

    async def get_dates(self) -> DateIndex:
        return await self._get(self._url(self._paths.dates), DateIndex, "dates")

    async def get_relations(self) -> RelationIndex:
        return await self._get(self._url(self._paths.relation), RelationIndex, "relation")

    def get_provider_name(self) -> str:
        return "groupietrackers"
