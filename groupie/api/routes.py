"""HTML routes for the artist listing and artist detail pages.

# Endpoint          Method  Description
# ------------------------------------------------------------------
# /                 GET     All artists (index.html)
# /artist?id=<id>   GET     One artist joined with locations, dates and
#                           relations (artist.html)

The aggregation service is read from ``app.state`` through ``Depends``.
Errors raised by the service are not handled here; ``ErrorHandlingMiddleware``
converts them into responses.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from groupie.services.aggregation_service import ArtistAggregationService
from groupie.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


def _get_aggregation_service(request: Request) -> ArtistAggregationService:
    """Return the aggregation service from application state."""
    return request.app.state.aggregation_service


AggregationDep = Annotated[ArtistAggregationService, Depends(_get_aggregation_service)]


@router.get("/", response_class=HTMLResponse)
async def list_artists(request: Request, service: AggregationDep) -> HTMLResponse:
    """Render every artist as a card linking to its detail page."""
    artists = await service.list_artists()
    return templates.TemplateResponse(request, "index.html", {"artists": artists})


@router.get("/artist", response_class=HTMLResponse)
async def artist_detail(
    request: Request,
    service: AggregationDep,
    artist_id: Annotated[str, Query(alias="id")] = "",
) -> HTMLResponse:
    """Render one artist with its concert locations, dates and relations.

    A missing ``id`` arrives as the empty string, which the service rejects
    with a ``ValidationError`` before touching the network.
    """
    view = await service.build_composite_view(artist_id)
    _logger.debug("artist_detail_rendered", artist_id=view.artist.id)
    return templates.TemplateResponse(request, "artist.html", {"view": view})
