"""Reversible, non-cryptographic character obfuscation with exportable key pools."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from shufflekey.core.engine import ShuffleKey
from shufflekey.core.errors import Diagnostic, ErrorKind, MappingDecodeError, ShuffleKeyError
from shufflekey.core.models import CipherResult, MappingObject


def create_cipher(options: Mapping[str, Any] | None = None, **kwargs: Any) -> ShuffleKey:
    """Create a new ``ShuffleKey`` instance."""
    return ShuffleKey(options, **kwargs)


__all__ = [
    "CipherResult",
    "Diagnostic",
    "ErrorKind",
    "MappingDecodeError",
    "MappingObject",
    "ShuffleKey",
    "ShuffleKeyError",
    "create_cipher",
]
