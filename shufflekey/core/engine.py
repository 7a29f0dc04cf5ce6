"""Public facade: option normalization, pool construction and encrypt/decrypt."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Mapping
from typing import Any

from shufflekey.config.options import CipherOptions, normalize_options
from shufflekey.config.settings import settings
from shufflekey.core.builder import IdSpaceExhaustedError, RandomSource, build_pool
from shufflekey.core.cipher import Direction, transform
from shufflekey.core.errors import Diagnostic, ErrorKind
from shufflekey.core.models import CipherResult, MappingObject, wire_dump
from shufflekey.storage import StoreState, create_store, read_pool
from shufflekey.util.logger import logger


class ShuffleKey:
    """Reversible character obfuscation over a pool of shuffled substitution tables.

    Not encryption in any security sense. Every public operation reports
    problems through ``diagnostics`` and falls back to a safe value instead of
    raising. Only the latest ``settings.max_diagnostics`` entries are kept;
    the ``*_result`` methods hand each one back as well.
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        rng: RandomSource | None = None,
        **overrides: Any,
    ) -> None:
        self._rng = rng
        self._store = create_store()
        self.options: CipherOptions = normalize_options(options, **overrides)
        self.diagnostics: deque[Diagnostic] = deque(self.options.diagnostics, maxlen=settings.max_diagnostics)

        if self.options.has_mapping_objects:
            self.load(self.options.mapping_objects)
        elif self.options.characters:
            self._build()

        self._store.mark_empty()

    @classmethod
    def from_file(cls, path: str | os.PathLike[str], **kwargs: Any) -> "ShuffleKey":
        """Instance preloaded from a pool file; raises ``MappingDecodeError`` if the file is bad."""
        kwargs.pop("mapping_objects", None)
        kwargs.pop("mappingObjects", None)
        return cls(mapping_objects=read_pool(path), **kwargs)

    def _build(self) -> None:
        try:
            objects = build_pool(self.options.characters, self.options.size, self._rng)
        except IdSpaceExhaustedError as exc:
            logger.error("pool build aborted: %s", exc)
            self.diagnostics.append(Diagnostic(ErrorKind.CONFIG_FATAL, str(exc)))
            return
        self._store.set_built(objects)

    def _record(self, result: CipherResult[Any]) -> CipherResult[Any]:
        if result.diagnostic is not None:
            self.diagnostics.append(result.diagnostic)
        return result

    @property
    def state(self) -> StoreState:
        return self._store.state

    def transform_result(self, data: Any, mapping_id: str | None, direction: Direction) -> CipherResult[Any]:
        return self._record(transform(self._store.objects(), mapping_id, data, direction))

    def encrypt_result(self, data: Any, mapping_id: str | None = None) -> CipherResult[Any]:
        return self.transform_result(data, mapping_id, "encrypt")

    def decrypt_result(self, data: Any, mapping_id: str | None = None) -> CipherResult[Any]:
        return self.transform_result(data, mapping_id, "decrypt")

    def encrypt(self, data: str, mapping_id: str | None = None) -> str:
        """Encrypt with *mapping_id*, or with the first mapping object when omitted."""
        return self.encrypt_result(data, mapping_id).value

    def decrypt(self, data: str, mapping_id: str | None = None) -> str:
        return self.decrypt_result(data, mapping_id).value

    def ids(self) -> list[str]:
        return self._store.ids()

    def export_objects(self) -> list[MappingObject]:
        """Pool in order, as a new list sharing the mapping objects. This is the key material."""
        return self._store.objects()

    def export_wire(self) -> list[dict[str, Any]]:
        return wire_dump(self._store.objects())

    def load_result(self, objects: Any) -> CipherResult[None]:
        return self._record(self._store.load(objects))

    def load(self, objects: Any) -> None:
        """Replace the whole pool; invalid input leaves the current pool untouched."""
        self.load_result(objects)

    def __repr__(self) -> str:
        return f"<ShuffleKey state={self.state.value} pool={len(self._store)}>"
