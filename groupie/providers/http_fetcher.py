"""Raw HTTP GET against the upstream API.

The fetcher does not look at the status code: whatever body upstream sends
is returned and left for the decoder to accept or reject.  Only failures
below HTTP (DNS, refused connection, reset, client-side timeout) become
:class:`~groupie.utils.errors.TransportError`.
"""

from __future__ import annotations

import httpx
import structlog

from groupie.utils.errors import TransportError
from groupie.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)


class HTTPFetcher:
    """Issue single GET requests over a shared ``httpx.AsyncClient``.

    Redirects are followed; there are no retries and no timeout of its own,
    so the client's default timeout applies.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._client = http_client

    async def fetch(self, url: str, resource: str | None = None) -> bytes:
        """GET *url* and return the full response body.

        The body is read inside the stream context, so the connection goes
        back to the pool before the caller decodes anything.
        """
        try:
            async with self._client.stream("GET", url, follow_redirects=True) as response:
                body = await response.aread()
        except httpx.RequestError as exc:
            raise TransportError(
                message=f"GET {url} failed: {exc}",
                resource=resource,
            ) from exc

        _logger.debug(
            "upstream_fetch",
            url=url,
            resource=resource,
            status=response.status_code,
            bytes=len(body),
        )
        return body
