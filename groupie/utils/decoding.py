"""Strict JSON decoding of upstream payloads into typed models.

Decoding is structural: malformed JSON, a wrong top-level type or
a field of the wrong type (``"id": "1"``, ``"id": true``) raises
:class:`~groupie.utils.errors.DecodeError`.  Missing or ``null`` fields are
not an error; the models give them empty/zero defaults.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from groupie.utils.errors import DecodeError

_T = TypeVar("_T")

# Error text echoed back to callers is capped so an upstream HTML error page
# does not end up verbatim in the response.
_MAX_DETAIL_LENGTH = 300


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode_payload(target: type[_T] | Any, payload: bytes, resource: str | None = None) -> _T:
    """Decode *payload* into *target* (a model class or a type like ``list[Artist]``).

    Raises
    ------
    DecodeError
        If the bytes are not JSON or do not match the target's shape.
    """
    try:
        return _adapter(target).validate_json(payload)
    except PydanticValidationError as exc:
        detail = str(exc)
        if len(detail) > _MAX_DETAIL_LENGTH:
            detail = detail[:_MAX_DETAIL_LENGTH] + "..."
        raise DecodeError(
            message=f"Invalid {resource or 'upstream'} payload: {detail}",
            resource=resource,
        ) from exc
