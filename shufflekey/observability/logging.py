"""Pool lifecycle log lines."""

from __future__ import annotations

from collections.abc import Sequence

from shufflekey.core.models import MappingObject
from shufflekey.util.logger import logger


def log_pool_event(event: str, state: str, objects: Sequence[MappingObject]) -> None:
    """One INFO line per pool replacement; never includes ids or tables."""
    symbols = len(objects[0].characters) if objects else 0
    logger.info("pool %s state=%s mapping_objects=%d symbols=%d", event, state, len(objects), symbols)
