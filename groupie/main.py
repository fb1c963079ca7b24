"""Groupie Tracker FastAPI application entry point.

Wires the upstream provider, the aggregation service and the HTML routes
together.  Loads configuration from ``.env`` and ``config/config.yaml`` and
configures structured logging.

Run with ``python -m groupie`` or ``uvicorn groupie.main:app``.  If the port
cannot be bound, uvicorn exits with a non-zero status; there is no retry.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx
import structlog
import uvicorn
from fastapi import FastAPI

from groupie.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from groupie.api.routes import router
from groupie.config.loader import load_config
from groupie.config.settings import Settings
from groupie.providers.groupie_api_provider import GroupieAPIProvider, ResourcePaths
from groupie.services.aggregation_service import ArtistAggregationService
from groupie.utils.logging import configure_logging, get_logger

settings = Settings()

configure_logging(
    log_level=settings.log_level,
    json_output=(settings.app_env == "production"),
)
_logger: structlog.BoundLogger = get_logger(__name__)


def _build_all(config: dict[str, Any]) -> dict[str, Any]:
    """Construct every provider and service instance for the application.

    Returns a flat dict of named components to be stored on ``app.state``.
    """
    # No timeout override: the client library default applies.
    http_client = httpx.AsyncClient(follow_redirects=True)

    provider = GroupieAPIProvider(
        http_client=http_client,
        base_url=config["upstream"]["base_url"],
        paths=ResourcePaths.from_config(config),
    )
    aggregation_service = ArtistAggregationService(provider=provider)

    return {
        "http_client": http_client,
        "provider": provider,
        "aggregation_service": aggregation_service,
    }


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def _lifespan(application: FastAPI):  # noqa: ANN202
        config = load_config(settings=app_settings)
        components = _build_all(config)

        for key, value in components.items():
            setattr(application.state, key, value)

        _logger.info(
            "app_startup",
            environment=app_settings.app_env,
            upstream=config["upstream"]["base_url"],
            provider=components["provider"].get_provider_name(),
        )

        yield

        http_client: httpx.AsyncClient = components["http_client"]
        await http_client.aclose()
        _logger.info("app_shutdown", message="HTTP client closed")

    application = FastAPI(
        title="Groupie Tracker",
        version="0.1.0",
        description="Artists, concert locations and dates from the Groupie Trackers API.",
        lifespan=_lifespan,
    )

    # Last added = first executed.
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)

    application.include_router(router)

    return application


app = create_app()


def run() -> None:
    """Serve the application on the configured host and port."""
    _logger.info("server_starting", host=settings.app_host, port=settings.app_port)
    uvicorn.run(
        "groupie.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=(settings.app_env == "development"),
    )


if __name__ == "__main__":
    run()
