from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class FullyNamed(Protocol):
    @property
    def full_name(self) -> str:
        ...


@dataclass(frozen=True)
class Person:
    full_name: str


class Starship:
    """
    Mutable, compared by full name rather than identity.
    Two ships with the same prefix and name are equal even if they are different objects.
    """

    # Mutable and value-compared, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, name: str, prefix: str | None = None) -> None:
        self.name = name
        self.prefix = prefix

    @property
    def full_name(self) -> str:
        return f"{self.prefix} {self.name}" if self.prefix else self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Starship):
            return NotImplemented
        return self.full_name == other.full_name

    def __repr__(self) -> str:
        return f"Starship(name={self.name!r}, prefix={self.prefix!r})"


def same_name(a: FullyNamed, b: FullyNamed) -> bool:
    return a.full_name == b.full_name
