from __future__ import annotations

import logging
from dataclasses import dataclass

from protodice.domain.exceptions import InvalidConfiguration, SourceContractViolation
from protodice.domain.rng import RandomSource, in_contract_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Die:
    """
    A die with a fixed number of sides, rolled through an injected RandomSource.
    The source is shared, not owned: several dice may hold the same one.
    """
    sides: int
    source: RandomSource

    def __post_init__(self) -> None:
        if isinstance(self.sides, bool) or not isinstance(self.sides, int):
            raise InvalidConfiguration(f"sides must be an integer, got {self.sides!r}")
        if self.sides <= 0:
            raise InvalidConfiguration(f"sides must be > 0, got {self.sides}")

    def roll(self) -> int:
        value = self.source.random()
        if not in_contract_range(value):
            name = type(self.source).__name__
            logger.warning("Source %s broke its range contract with %d", name, value)
            raise SourceContractViolation(value, name)

        # Map [1, 10] onto [1, sides]
        result = value % self.sides + 1
        logger.debug("d%d rolled %d (source gave %d)", self.sides, result, value)
        return result

    def roll_many(self, count: int) -> tuple[int, ...]:
        if count < 0:
            raise InvalidConfiguration(f"count must be >= 0, got {count}")
        return tuple(self.roll() for _ in range(count))
