"""Named character-set registry with an optional YAML overlay and mtime-based cache."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from threading import Lock
from typing import Any

import yaml

from shufflekey.config.settings import settings
from shufflekey.util.logger import logger


_EN_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TR_LOWER = "abcçdefgğhıijklmnoöprsştuüvyz"
_TR_UPPER = "ABCÇDEFGĞHIİJKLMNOÖPRSŞTUÜVYZ"

_DEFAULT_SETS: dict[str, list[str]] = {
    "en": list(_EN_LOWER + _EN_LOWER.upper()),
    "tr": list(_TR_LOWER + _TR_UPPER),
    "number": list("0123456789"),
}

_CACHE_LOCK = Lock()
_CACHE_PATH = ""
_CACHE_MTIME_NS = -1
_CACHE_SETS: dict[str, list[str]] | None = None


def _resolve_sets_file(path: str) -> Path:
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    app_root = Path(__file__).resolve().parents[2]
    candidates = [Path.cwd() / candidate, app_root / candidate]
    for item in candidates:
        if item.exists():
            return item.resolve()
    return candidates[-1].resolve()


def _coerce_symbols(name: str, raw: Any) -> list[str] | None:
    if isinstance(raw, str):
        return list(raw)
    if isinstance(raw, list) and all(isinstance(item, str) and item for item in raw):
        return list(raw)
    logger.warning("character set skipped (expected string or list of strings) name=%s", name)
    return None


def load_character_sets(path: str | None = None) -> dict[str, list[str]]:
    """Return built-in sets merged with the YAML overlay at *path*.

    The overlay is a mapping of set name to either a string (one symbol per
    character) or a list of symbols. Overlay entries replace built-ins of the
    same name.
    """
    global _CACHE_PATH, _CACHE_MTIME_NS, _CACHE_SETS

    sets_path = _resolve_sets_file(path or settings.character_sets_path)
    path_key = str(sets_path)
    mtime_ns = sets_path.stat().st_mtime_ns if sets_path.exists() else -1

    with _CACHE_LOCK:
        if _CACHE_SETS is not None and _CACHE_PATH == path_key and _CACHE_MTIME_NS == mtime_ns:
            return deepcopy(_CACHE_SETS)

        sets = deepcopy(_DEFAULT_SETS)
        if sets_path.exists():
            raw = yaml.safe_load(sets_path.read_text(encoding="utf-8")) or {}
            if not isinstance(raw, dict):
                raise ValueError(f"character sets file must be a mapping: {sets_path}")
            for name, value in raw.items():
                symbols = _coerce_symbols(str(name), value)
                if symbols is not None:
                    sets[str(name)] = symbols
            logger.info("character sets loaded path=%s count=%d", sets_path, len(sets))
        else:
            logger.debug("character sets file not found, using built-ins path=%s", sets_path)

        _CACHE_PATH = path_key
        _CACHE_MTIME_NS = mtime_ns
        _CACHE_SETS = sets
        return deepcopy(sets)


def get_character_set(name: str, path: str | None = None) -> list[str] | None:
    """Symbols registered under *name*, or ``None`` when unknown."""
    return load_character_sets(path).get(name)


def available_character_sets(path: str | None = None) -> list[str]:
    return sorted(load_character_sets(path))


def builtin_character_sets() -> dict[str, list[str]]:
    """Built-in sets only, ignoring any overlay file."""
    return deepcopy(_DEFAULT_SETS)
