from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """The two draws a combatant needs.

    Tests implement this with scripted values to force evasion and exact
    damage rolls.
    """

    def randint(self, a: int, b: int) -> int:  # pragma: no cover - protocol
        ...

    def random(self) -> float:  # pragma: no cover - protocol
        ...


@dataclass
class RNG:
    """Default RandomSource backed by a private random.Random.

    Unseeded draws are uncontrolled; ``seed`` only exists so a debugging
    session can rerun the same duel on the same interpreter.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        if self.seed is not None:
            logger.debug("Seeded duel RNG with %s", self.seed)

    def random(self) -> float:
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)


__all__ = ["RandomSource", "RNG"]
