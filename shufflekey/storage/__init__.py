"""Pool ownership and persistence helpers."""

from __future__ import annotations

from shufflekey.storage.pool_file import read_pool, save_pool
from shufflekey.storage.pool_store import MappingStore, StoreState


def create_store() -> MappingStore:
    return MappingStore()


__all__ = ["MappingStore", "StoreState", "create_store", "read_pool", "save_pool"]
