"""Per-symbol substitution through a selected mapping object."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal

from shufflekey.core.errors import Diagnostic, ErrorKind
from shufflekey.core.models import CipherResult, MappingObject
from shufflekey.util.logger import logger
from shufflekey.util.masking import mask_for_log


Direction = Literal["encrypt", "decrypt"]


def find_mapping(pool: Sequence[MappingObject], mapping_id: str | None) -> MappingObject | None:
    if not pool:
        return None
    if not mapping_id:
        return pool[0]
    for item in pool:
        if item.id == mapping_id:
            return item
    return None


def substitute(table: dict[str, str], data: str) -> str:
    return "".join(table.get(symbol, symbol) for symbol in data)


def transform(
    pool: Sequence[MappingObject],
    mapping_id: str | None,
    data: Any,
    direction: Direction,
) -> CipherResult[Any]:
    """Map *data* through the chosen table; on any error return *data* unchanged with a diagnostic."""
    if not isinstance(data, str):
        message = f"{direction} expected string, got {type(data).__name__}"
        logger.error(message)
        return CipherResult(data, Diagnostic(ErrorKind.OPERATION_ERROR, message))

    item = find_mapping(pool, mapping_id)
    if item is None:
        message = f"mapping object with id '{mask_for_log(mapping_id)}' not found (pool size={len(pool)})"
        logger.error("%s %s", direction, message)
        return CipherResult(data, Diagnostic(ErrorKind.OPERATION_ERROR, message))

    return CipherResult(substitute(item.table(direction), data))
