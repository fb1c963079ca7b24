"""Public interface definitions for external services.

The upstream API is accessed only through :class:`IArtistAPIProvider`, so the
aggregation service can be exercised against fakes.
"""

from groupie.interfaces.artist_api_provider import IArtistAPIProvider

__all__ = ["IArtistAPIProvider"]
