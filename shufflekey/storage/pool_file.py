"""
Pool persistence: the interchange list of mapping objects as a UTF-8 JSON file.

The file holds exactly what ``ShuffleKey.export_wire()`` returns, so it can be
edited or moved between processes and handed back to ``load``.
"""

from __future__ import annotations

import json
import os
from collections.abc import Sequence
from pathlib import Path

from shufflekey.core.codec import decode_mapping_objects_json
from shufflekey.core.errors import MappingDecodeError
from shufflekey.core.models import MappingObject, wire_dump
from shufflekey.util.logger import logger


def _path(path: str | os.PathLike[str]) -> Path:
    p = Path(path)
    return p if p.is_absolute() else Path.cwd() / p


def save_pool(path: str | os.PathLike[str], objects: Sequence[MappingObject]) -> Path:
    """Write *objects* to *path*, creating parent directories."""
    target = _path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    data = wire_dump(list(objects))
    target.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.debug("pool saved path=%s count=%d", target, len(data))
    return target


def read_pool(path: str | os.PathLike[str]) -> list[MappingObject]:
    """Read and decode a pool file; raises ``MappingDecodeError`` on any failure."""
    source = _path(path)
    if not source.is_file():
        raise MappingDecodeError(f"pool file not found: {source}")
    try:
        raw = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MappingDecodeError(f"pool file unreadable: {source}: {exc}") from exc

    decoded = decode_mapping_objects_json(raw)
    if decoded.diagnostic is not None:
        raise MappingDecodeError(f"{source}: {decoded.diagnostic.message}")
    logger.info("pool file loaded path=%s count=%d", source, len(decoded.value or []))
    return decoded.value or []
