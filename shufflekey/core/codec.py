"""Typed decode of foreign mapping pools (instances or interchange dicts)."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from shufflekey.core.errors import Diagnostic, ErrorKind
from shufflekey.core.models import CipherResult, MappingObject
from shufflekey.util.masking import mask_for_log


LOAD_EXPECTED_MESSAGE = "load expected array of mapping object"

_POOL_ADAPTER = TypeAdapter(list[MappingObject])


def _error(detail: str | None = None) -> CipherResult[list[MappingObject] | None]:
    message = LOAD_EXPECTED_MESSAGE if not detail else f"{LOAD_EXPECTED_MESSAGE} ({detail})"
    return CipherResult(None, Diagnostic(ErrorKind.OPERATION_ERROR, message))


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid mapping object"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first.get('msg', 'invalid')}" if loc else str(first.get("msg", "invalid"))


def decode_mapping_objects(raw: Any) -> CipherResult[list[MappingObject] | None]:
    """Validate *raw* as an ordered sequence of mapping objects.

    Accepts lists or tuples of ``MappingObject`` or interchange dicts. Every
    returned object is a private deep copy, so the decoded pool never aliases
    the caller's data. Duplicate ids are rejected.
    """
    if not isinstance(raw, (list, tuple)):
        return _error()

    try:
        decoded = _POOL_ADAPTER.validate_python(list(raw))
    except ValidationError as exc:
        return _error(_first_error(exc))

    seen: set[str] = set()
    for item in decoded:
        if item.id in seen:
            return _error(f"duplicate id {mask_for_log(item.id)}")
        seen.add(item.id)

    return CipherResult([item.model_copy(deep=True) for item in decoded])


def decode_mapping_objects_json(payload: str | bytes) -> CipherResult[list[MappingObject] | None]:
    try:
        decoded = _POOL_ADAPTER.validate_json(payload)
    except ValidationError as exc:
        return _error(_first_error(exc))
    return decode_mapping_objects(decoded)
