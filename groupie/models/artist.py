"""Upstream record models and the per-request composite view.

The upstream API exposes five resources.  ``/artists`` and ``/artists/{id}``
return :class:`Artist` records directly; ``/locations``, ``/dates`` and
``/relation`` each return a wrapper object whose ``index`` field holds the
records.  The wrappers are kept as real models so the decoded shape matches
what upstream sends.

Every per-artist record carries the artist's numeric ``id``; that shared key
is what :class:`~groupie.services.aggregation_service.ArtistAggregationService`
joins on.  All fields have zero/empty defaults, so a record built with no
arguments is the placeholder used when no correlated record exists.
Integer fields are strict: ``"1"`` or ``true`` is rejected, never coerced.

Field names on the wire are camelCase (``creationDate``, ``datesLocations``);
``populate_by_name`` lets Python code and tests use the snake_case names.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _UpstreamRecord(BaseModel):
    """Base for every model decoded from an upstream payload.

    A JSON ``null`` is read as an absent field, so the field keeps its
    zero/empty default instead of failing validation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Artist(_UpstreamRecord):
    """A band or solo artist as listed by upstream."""

    id: int = Field(default=0, strict=True)
    name: str = ""
    image: str = ""                                   # URI of the artist picture
    members: list[str] = Field(default_factory=list)  # in upstream order
    creation_date: int = Field(default=0, alias="creationDate", strict=True)
    first_album: str = Field(default="", alias="firstAlbum")


class LocationRecord(_UpstreamRecord):
    """Concert locations for one artist (order carries no meaning)."""

    id: int = Field(default=0, strict=True)
    locations: list[str] = Field(default_factory=list)


class DateRecord(_UpstreamRecord):
    """Concert dates for one artist, in upstream order."""

    id: int = Field(default=0, strict=True)
    dates: list[str] = Field(default_factory=list)


class RelationRecord(_UpstreamRecord):
    """Mapping of location name to the concert dates played there."""

    id: int = Field(default=0, strict=True)
    dates_locations: dict[str, list[str]] = Field(default_factory=dict, alias="datesLocations")


class LocationIndex(_UpstreamRecord):
    """Wrapper returned by ``/locations``."""

    index: list[LocationRecord] = Field(default_factory=list)


class DateIndex(_UpstreamRecord):
    """Wrapper returned by ``/dates``."""

    index: list[DateRecord] = Field(default_factory=list)


class RelationIndex(_UpstreamRecord):
    """Wrapper returned by ``/relation``."""

    index: list[RelationRecord] = Field(default_factory=list)


class CompositeArtistView(BaseModel):
    """One artist joined with its correlated location, date and relation records.

    Built once per detail request and discarded after rendering.  The three
    correlated fields are never ``None``; when upstream has no matching
    record they hold an empty placeholder.
    """

    model_config = ConfigDict(frozen=True)

    artist: Artist
    location: LocationRecord = Field(default_factory=LocationRecord)
    date: DateRecord = Field(default_factory=DateRecord)
    relation: RelationRecord = Field(default_factory=RelationRecord)
