from __future__ import annotations

import random

from protodice.domain.exceptions import InvalidConfiguration
from protodice.domain.rng import RANDOM_MAX, RANDOM_MIN, RandomSource


class OneThroughTen:
    """Uniform draw from 1..10 inclusive."""

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def random(self) -> int:
        return self._rng.randint(RANDOM_MIN, RANDOM_MAX)


class OddThroughNineteen:
    """
    Odd values 1, 3, ..., 19 (2*u - 1 for u uniform in 1..10).

    Anything from 11 up falls outside the RandomSource range, so a Die fed by
    this source raises SourceContractViolation on roughly half its rolls.
    Kept as-is; do not clamp.
    """

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def random(self) -> int:
        return self._rng.randint(RANDOM_MIN, RANDOM_MAX) * 2 - 1


_KINDS = {
    "uniform": OneThroughTen,
    "odd": OddThroughNineteen,
}


def make_source(kind: str, *, seed: int | None = None) -> RandomSource:
    try:
        cls = _KINDS[kind]
    except KeyError:
        raise InvalidConfiguration(
            f"Unknown source kind {kind!r}; expected one of {sorted(_KINDS)}"
        ) from None
    return cls(rng=random.Random(seed))
