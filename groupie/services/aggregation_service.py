"""Correlation of an artist with its location, date and relation records.

Upstream serves the three per-artist collections as independent bulk
resources keyed by artist ``id``.  :class:`ArtistAggregationService` fetches
the artist, fetches the three collections concurrently via
``asyncio.gather``, and joins them by identifier into a
:class:`CompositeArtistView`.

The join is all-or-nothing on fetch failure: if the artist or any bulk
collection cannot be fetched or decoded, the error propagates and no view is
built.  A collection that simply has no record for the artist is not a
failure; the view gets an empty placeholder for it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Protocol, TypeVar

import structlog

from groupie.interfaces.artist_api_provider import IArtistAPIProvider
from groupie.models.artist import (
    Artist,
    CompositeArtistView,
    DateRecord,
    LocationRecord,
    RelationRecord,
)
from groupie.utils.errors import ArtistNotFoundError, ValidationError
from groupie.utils.logging import get_logger


class _Identified(Protocol):
    id: int


_R = TypeVar("_R", bound=_Identified)


def first_match(records: Iterable[_R], artist_id: int, placeholder: _R) -> _R:
    """Return the first record whose ``id`` equals *artist_id*, else *placeholder*.

    Duplicate identifiers are not reported; the earliest one wins.
    """
    for record in records:
        if record.id == artist_id:
            return record
    return placeholder


class ArtistAggregationService:
    """Builds per-request artist views from the upstream API.

    Holds no state besides the injected provider, so one instance is shared
    by all requests.
    """

    def __init__(self, provider: IArtistAPIProvider) -> None:
        self._provider = provider
        self._logger: structlog.BoundLogger = get_logger(__name__)

    # -- Public API -----------------------------------------------------------

    async def list_artists(self) -> list[Artist]:
        """Return every artist for the listing page, in upstream order."""
        return await self._provider.get_artists()

    async def build_composite_view(self, artist_id: str) -> CompositeArtistView:
        """Fetch and join everything known about *artist_id*.

        Parameters
        ----------
        artist_id:
            Identifier as received from the caller.  It is passed to
            upstream untouched.

        Returns
        -------
        CompositeArtistView
            The artist with its correlated records; missing records are
            empty placeholders.

        Raises
        ------
        ValidationError
            If *artist_id* is empty.  Raised before any network call.
        ArtistNotFoundError
            If upstream answers with a zero-valued artist.
        TransportError, DecodeError
            If any of the four fetches fails.
        """
        if not artist_id or not artist_id.strip():
            raise ValidationError(message="Missing artist ID", resource="artist")

        artist = await self._provider.get_artist(artist_id)
        if artist.id == 0:
            raise ArtistNotFoundError(artist_id)

        results = await asyncio.gather(
            self._provider.get_locations(),
            self._provider.get_dates(),
            self._provider.get_relations(),
            return_exceptions=True,
        )
        # Surface the first failure in a fixed order so the reported error
        # does not depend on which fetch finished first.
        for result in results:
            if isinstance(result, BaseException):
                raise result
        locations, dates, relations = results

        view = CompositeArtistView(
            artist=artist,
            location=first_match(locations.index, artist.id, LocationRecord()),
            date=first_match(dates.index, artist.id, DateRecord()),
            relation=first_match(relations.index, artist.id, RelationRecord()),
        )

        self._logger.info(
            "composite_view_built",
            artist_id=artist.id,
            artist=artist.name,
            locations=len(view.location.locations),
            dates=len(view.date.dates),
            relations=len(view.relation.dates_locations),
        )
        return view
