"""In-memory owner of one instance's mapping pool."""

from __future__ import annotations

from enum import Enum
from typing import Any

from shufflekey.core.codec import decode_mapping_objects
from shufflekey.core.models import CipherResult, MappingObject
from shufflekey.observability.logging import log_pool_event
from shufflekey.util.logger import logger


class StoreState(str, Enum):
    UNINITIALIZED = "uninitialized"
    BUILT = "built"
    LOADED = "loaded"
    EMPTY = "empty"


class MappingStore:
    """Holds the ordered pool and its id index.

    The pool is only ever replaced as a whole, by ``set_built`` during
    construction or by ``load``; ids are recomputed on every replacement.
    """

    def __init__(self) -> None:
        self._objects: list[MappingObject] = []
        self._ids: list[str] = []
        self._state = StoreState.UNINITIALIZED

    @property
    def state(self) -> StoreState:
        return self._state

    def __len__(self) -> int:
        return len(self._objects)

    def ids(self) -> list[str]:
        return list(self._ids)

    def objects(self) -> list[MappingObject]:
        """Pool in order. The list is a copy; the mapping objects are shared and expose key material."""
        return list(self._objects)

    def _replace(self, objects: list[MappingObject], state: StoreState) -> None:
        self._objects = objects
        self._ids = [obj.id for obj in objects]
        self._state = state

    def set_built(self, objects: list[MappingObject]) -> None:
        if self._state is not StoreState.UNINITIALIZED:
            raise RuntimeError(f"pool already initialized state={self._state.value}")
        self._replace(objects, StoreState.BUILT)
        log_pool_event("built", self._state.value, objects)

    def mark_empty(self) -> None:
        if self._state is StoreState.UNINITIALIZED:
            self._state = StoreState.EMPTY

    def load(self, objects: Any) -> CipherResult[None]:
        """Decode *objects* and swap them in; on failure the current pool stays untouched."""
        decoded = decode_mapping_objects(objects)
        if decoded.diagnostic is not None:
            logger.error(decoded.diagnostic.message)
            return CipherResult(None, decoded.diagnostic)

        self._replace(decoded.value, StoreState.LOADED)
        log_pool_event("loaded", self._state.value, decoded.value)
        return CipherResult(None)
