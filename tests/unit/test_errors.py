"""Unit tests for the exception hierarchy in groupie.utils.errors."""

from __future__ import annotations

import pytest

from groupie.api.middleware import error_status
from groupie.utils.errors import (
    ArtistNotFoundError,
    DecodeError,
    GroupieTrackerError,
    TransportError,
    ValidationError,
)


class TestGroupieTrackerError:
    def test_str_prefixes_resource(self) -> None:
        exc = TransportError(message="Connection refused", resource="locations")
        assert str(exc) == "[locations] Connection refused"

    def test_str_without_resource(self) -> None:
        exc = ValidationError(message="Missing artist ID")
        assert str(exc) == "Missing artist ID"
        assert exc.resource is None

    @pytest.mark.parametrize("cls", [TransportError, DecodeError, ValidationError])
    def test_subclasses_share_base(self, cls: type[GroupieTrackerError]) -> None:
        exc = cls()
        assert isinstance(exc, GroupieTrackerError)
        assert exc.message

    def test_artist_not_found_is_decode_error(self) -> None:
        exc = ArtistNotFoundError("42")
        assert isinstance(exc, DecodeError)
        assert exc.artist_id == "42"
        assert exc.resource == "artist"
        assert "42" in exc.message


class TestErrorStatus:
    def test_validation_error_is_client_error(self) -> None:
        assert error_status(ValidationError()) == 400

    @pytest.mark.parametrize(
        "exc",
        [TransportError(), DecodeError(), ArtistNotFoundError("7")],
    )
    def test_upstream_errors_are_server_errors(self, exc: GroupieTrackerError) -> None:
        assert error_status(exc) == 500
