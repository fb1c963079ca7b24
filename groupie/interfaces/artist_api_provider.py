"""Abstract base class for the upstream artists API.

Defines the five read-only accessors the aggregation service and the listing
page depend on.  The concrete HTTP adapter lives in
``groupie/providers/groupie_api_provider.py``; tests substitute fakes or the
real adapter over ``httpx.MockTransport``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from groupie.models.artist import Artist, DateIndex, LocationIndex, RelationIndex


class IArtistAPIProvider(ABC):
    """Contract for fetching artist data and its correlated collections.

    Every call goes to the network; implementations must not cache.
    """

    @abstractmethod
    async def get_artists(self) -> list[Artist]:
        """Return every artist, in upstream order.

        Raises
        ------
        groupie.utils.errors.TransportError
            If upstream cannot be reached.
        groupie.utils.errors.DecodeError
            If the payload is not a list of artists.
        """

    @abstractmethod
    async def get_artist(self, artist_id: str) -> Artist:
        """Return the artist identified by *artist_id*.

        *artist_id* is passed through to the URL as-is; upstream decides
        whether it names an artist.
        """

    @abstractmethod
    async def get_locations(self) -> LocationIndex:
        """Return the ``/locations`` wrapper."""

    @abstractmethod
    async def get_dates(self) -> DateIndex:
        """Return the ``/dates`` wrapper."""

    @abstractmethod
    async def get_relations(self) -> RelationIndex:
        """Return the ``/relation`` wrapper."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a human-readable identifier for this provider."""
