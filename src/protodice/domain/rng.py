from __future__ import annotations
from typing import Protocol

RANDOM_MIN = 1
RANDOM_MAX = 10


class RandomSource(Protocol):
    def random(self) -> int:  # returns in [RANDOM_MIN, RANDOM_MAX]
        ...


def in_contract_range(value: int) -> bool:
    return RANDOM_MIN <= value <= RANDOM_MAX
