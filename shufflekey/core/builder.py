"""Mapping pool construction: unique ids, shuffle, mirror-pairing tables."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import Protocol

from shufflekey.config.settings import settings
from shufflekey.core.errors import ShuffleKeyError
from shufflekey.core.models import MappingObject
from shufflekey.util.logger import get_logger


logger = get_logger("builder")

ID_SPACE_MAX = 23_422_166_453

# shared, unseeded; callers wanting reproducible pools pass their own generator
_shared_rng = random.Random()


class RandomSource(Protocol):
    def random(self) -> float: ...


class IdSpaceExhaustedError(ShuffleKeyError):
    """Raised when no unused id could be drawn within the retry budget."""


def _js_round(value: float) -> int:
    return math.floor(value + 0.5)


def generate_id(taken: set[str], rng: RandomSource, max_attempts: int | None = None) -> str:
    attempts = max_attempts or settings.max_id_attempts
    for _ in range(attempts):
        candidate = str(_js_round(rng.random() * ID_SPACE_MAX))
        if candidate not in taken:
            return candidate
    raise IdSpaceExhaustedError(f"no free mapping id after {attempts} attempts (taken={len(taken)})")


def shuffle_in_place(symbols: list[str], rng: RandomSource) -> None:
    """Swap every position with a random index drawn from ``[0, n-2]``.

    The final index is never chosen as a swap target, so the permutation
    distribution is not uniform.
    """
    length = len(symbols)
    for j in range(length):
        target = math.floor(rng.random() * (length - 1))
        symbols[j], symbols[target] = symbols[target], symbols[j]


def mirror_tables(symbols: Sequence[str]) -> tuple[dict[str, str], dict[str, str]]:
    """Pair position ``j`` with ``n-1-j``; later pairs overwrite duplicate symbols."""
    encrypt: dict[str, str] = {}
    decrypt: dict[str, str] = {}
    last = len(symbols) - 1
    for j, symbol in enumerate(symbols):
        mapped = symbols[last - j]
        encrypt[symbol] = mapped
        decrypt[mapped] = symbol
    return encrypt, decrypt


def build_mapping_object(mapping_id: str, characters: Sequence[str], rng: RandomSource) -> MappingObject:
    working = list(characters)
    shuffle_in_place(working, rng)
    encrypt, decrypt = mirror_tables(working)
    return MappingObject(id=mapping_id, encrypt=encrypt, decrypt=decrypt, characters=working)


def build_pool(
    characters: Sequence[str],
    size: int,
    rng: RandomSource | None = None,
    *,
    max_id_attempts: int | None = None,
) -> list[MappingObject]:
    """Build *size* mapping objects, each shuffled from a fresh copy of *characters*."""
    source = rng or _shared_rng
    pool: list[MappingObject] = []
    taken: set[str] = set()
    for _ in range(size):
        mapping_id = generate_id(taken, source, max_id_attempts)
        taken.add(mapping_id)
        pool.append(build_mapping_object(mapping_id, characters, source))
    logger.debug("built pool size=%d symbols=%d", len(pool), len(characters))
    return pool
