"""Concrete adapters for external services."""

from groupie.providers.groupie_api_provider import GroupieAPIProvider, ResourcePaths
from groupie.providers.http_fetcher import HTTPFetcher

__all__ = ["GroupieAPIProvider", "HTTPFetcher", "ResourcePaths"]
