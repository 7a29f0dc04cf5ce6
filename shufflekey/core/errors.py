"""Project error hierarchy and diagnostic records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ShuffleKeyError(Exception):
    """Base error."""


class MappingDecodeError(ShuffleKeyError):
    """Raised when persisted mapping objects cannot be decoded."""


class ErrorKind(str, Enum):
    CONFIG_WARNING = "config_warning"
    CONFIG_FATAL = "config_fatal"
    OPERATION_ERROR = "operation_error"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
