"""Mapping object and result models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from shufflekey.core.errors import Diagnostic


T = TypeVar("T")


class MappingObject(BaseModel):
    """One substitution table plus the permutation it was derived from.

    Serialises to the interchange form
    ``{"id", "encrypt", "decrypt", "characters"}`` via ``model_dump()``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    encrypt: dict[str, str] = Field(default_factory=dict)
    decrypt: dict[str, str] = Field(default_factory=dict)
    characters: list[str] = Field(default_factory=list)

    def table(self, direction: str) -> dict[str, str]:
        return self.decrypt if direction == "decrypt" else self.encrypt


@dataclass(slots=True)
class CipherResult(Generic[T]):
    """Outcome of a never-raising operation: a value plus an optional diagnostic."""

    value: T
    diagnostic: Diagnostic | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


def wire_dump(objects: list[MappingObject]) -> list[dict[str, Any]]:
    return [obj.model_dump() for obj in objects]
