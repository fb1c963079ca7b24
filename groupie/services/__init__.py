"""Application services."""

from groupie.services.aggregation_service import ArtistAggregationService, first_match

__all__ = ["ArtistAggregationService", "first_match"]
