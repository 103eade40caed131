from __future__ import annotations

import logging

from protodice.app.config import DiceSettings, get_settings
from protodice.domain.dice import Die
from protodice.domain.exceptions import SourceContractViolation
from protodice.infra.random_sources import make_source

logger = logging.getLogger(__name__)


def run_demo(settings: DiceSettings) -> list[int]:
    source = make_source(settings.source, seed=settings.seed)
    die = Die(sides=settings.sides, source=source)
    logger.info("Rolling d%d x%d with %s source", die.sides, settings.rolls, settings.source)

    results: list[int] = []
    for _ in range(settings.rolls):
        try:
            result = die.roll()
        except SourceContractViolation as e:
            logger.error("Roll aborted: %s", e)
            raise
        logger.info("Random dice roll is %d", result)
        results.append(result)
    return results


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_demo(settings)
