"""Custom exception hierarchy for Groupie Tracker.

All application exceptions inherit from :class:`GroupieTrackerError`, which
carries an optional ``resource`` tag so error handlers and logs can tell
which upstream collection (``artists``, ``locations``, ``dates``,
``relation``) caused the failure.

    GroupieTrackerError  (base -- catch-all)
    +-- TransportError       (connection-level failure talking to upstream)
    +-- DecodeError          (malformed or unexpected-shape payload)
    |   +-- ArtistNotFoundError  (upstream answered with an empty artist)
    +-- ValidationError      (missing or empty caller input)

No layer retries or recovers; every error reaches the API middleware, which
maps ``ValidationError`` to a client error and everything else to a server
error.
"""


class GroupieTrackerError(Exception):
    """Base exception for all Groupie Tracker errors.

    The ``__str__`` method prefixes the resource tag in brackets, e.g.
    ``[locations] Connection refused``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        resource: str | None = None,
    ) -> None:
        self._message = message
        self._resource = resource
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def resource(self) -> str | None:
        return self._resource

    def __str__(self) -> str:
        if self._resource:
            return f"[{self._resource}] {self._message}"
        return self._message


class TransportError(GroupieTrackerError):
    """Raised when the upstream API cannot be reached (DNS, refused, reset)."""

    def __init__(
        self,
        message: str = "Upstream API is unreachable",
        resource: str | None = None,
    ) -> None:
        super().__init__(message=message, resource=resource)


class DecodeError(GroupieTrackerError):
    """Raised when an upstream payload is not valid JSON of the expected shape."""

    def __init__(
        self,
        message: str = "Upstream payload could not be decoded",
        resource: str | None = None,
    ) -> None:
        super().__init__(message=message, resource=resource)


class ArtistNotFoundError(DecodeError):
    """Raised when the single-artist endpoint returns a zero-valued record.

    Upstream answers unknown identifiers with an artist whose ``id`` is 0
    rather than a distinct status, so the decoded payload is the only
    signal available.
    """

    def __init__(
        self,
        artist_id: str,
        resource: str | None = "artist",
    ) -> None:
        self._artist_id = artist_id
        super().__init__(message=f"Artist {artist_id} not found", resource=resource)

    @property
    def artist_id(self) -> str:
        return self._artist_id


class ValidationError(GroupieTrackerError):
    """Raised when required caller input is missing, before any network call."""

    def __init__(
        self,
        message: str = "Invalid request",
        resource: str | None = None,
    ) -> None:
        super().__init__(message=message, resource=resource)
