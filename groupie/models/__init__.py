"""Groupie Tracker domain models -- re-exports all public model classes."""

from __future__ import annotations

from groupie.models.artist import (
    Artist,
    CompositeArtistView,
    DateIndex,
    DateRecord,
    LocationIndex,
    LocationRecord,
    RelationIndex,
    RelationRecord,
)

__all__ = [
    "Artist",
    "CompositeArtistView",
    "DateIndex",
    "DateRecord",
    "LocationIndex",
    "LocationRecord",
    "RelationIndex",
    "RelationRecord",
]
