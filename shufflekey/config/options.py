"""Caller option normalization: defaults, size coercion and character pool resolution."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

from shufflekey.config.character_sets import builtin_character_sets, load_character_sets
from shufflekey.config.settings import settings
from shufflekey.core.errors import Diagnostic, ErrorKind
from shufflekey.util.logger import logger


_INT_RE = re.compile(r"^\s*\+?\d+\s*$")
_ALIASES = {
    "size": "size",
    "character_set": "character_set",
    "characterSet": "character_set",
    "characters": "characters",
    "mapping_objects": "mapping_objects",
    "mappingObjects": "mapping_objects",
}


@dataclass(slots=True)
class CipherOptions:
    size: int
    character_set: list[str]
    characters: list[str]
    mapping_objects: Any = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_mapping_objects(self) -> bool:
        return self.mapping_objects is not None


def default_character_set() -> list[str]:
    return [item.strip() for item in settings.default_character_sets.split(",") if item.strip()]


def _warn(diagnostics: list[Diagnostic], message: str) -> None:
    logger.warning(message)
    diagnostics.append(Diagnostic(ErrorKind.CONFIG_WARNING, message))


def coerce_size(raw: Any, diagnostics: list[Diagnostic]) -> int:
    """Integer size from ints, integral floats and digit strings; anything else falls back to the default."""
    default = settings.default_size
    if raw is None:
        return default

    value: int | None = None
    if isinstance(raw, bool):
        value = None
    elif isinstance(raw, int):
        value = raw
    elif isinstance(raw, float) and math.isfinite(raw) and raw.is_integer():
        value = int(raw)
    elif isinstance(raw, str) and _INT_RE.match(raw):
        value = int(raw)

    if value is None or value < 1:
        _warn(diagnostics, f"size must be a positive integer, got {raw!r}; using {default}")
        return default
    return value


def _is_symbol_sequence(raw: Any) -> bool:
    return isinstance(raw, (list, tuple)) and all(isinstance(item, str) for item in raw)


def resolve_character_set(names: Any, diagnostics: list[Diagnostic]) -> list[str]:
    """Concatenate registry sets in listed order, skipping unknown names."""
    if not isinstance(names, (list, tuple)):
        _warn(diagnostics, f"character_set must be a list of names, got {type(names).__name__}")
        return []

    try:
        registry = load_character_sets()
    except (ValueError, yaml.YAMLError, OSError) as exc:
        _warn(diagnostics, f"character sets overlay unusable, using built-in sets: {exc}")
        registry = builtin_character_sets()

    combined: list[str] = []
    for name in names:
        symbols = registry.get(str(name))
        if symbols is None:
            _warn(diagnostics, f"character set '{name}' not found")
            continue
        combined.extend(symbols)
    return combined


def normalize_options(options: Mapping[str, Any] | None = None, **overrides: Any) -> CipherOptions:
    """Merge *options* and *overrides* over defaults and resolve the character pool."""
    merged: dict[str, Any] = {}
    for source in (options or {}, overrides):
        for key, value in source.items():
            canonical = _ALIASES.get(key)
            if canonical is None:
                logger.debug("ignoring unrecognized option key=%s", key)
                continue
            merged[canonical] = value

    diagnostics: list[Diagnostic] = []
    size = coerce_size(merged.get("size"), diagnostics)

    character_set = merged.get("character_set")
    if character_set is None:
        character_set = default_character_set()

    characters: list[str] | None = None
    raw_characters = merged.get("characters")
    if raw_characters is not None:
        if _is_symbol_sequence(raw_characters):
            characters = list(raw_characters)
        else:
            _warn(diagnostics, "characters must be a list of symbols; falling back to character_set")

    if characters is None:
        characters = resolve_character_set(character_set, diagnostics)

    mapping_objects = merged.get("mapping_objects")
    if not characters and mapping_objects is None:
        message = "no valid characters available for encryption"
        logger.error(message)
        diagnostics.append(Diagnostic(ErrorKind.CONFIG_FATAL, message))

    return CipherOptions(
        size=size,
        character_set=list(character_set) if isinstance(character_set, (list, tuple)) else [],
        characters=characters,
        mapping_objects=mapping_objects,
        diagnostics=diagnostics,
    )
