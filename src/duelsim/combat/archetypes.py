from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class FighterStats:
    """Fixed stat block shared by every fighter of one archetype.

    Attributes:
        name: Display name used in narration.
        min_damage: Lowest damage a single attack can roll (inclusive, > 0).
        max_damage: Highest damage a single attack can roll (inclusive).
        evasion_probability: Chance in [0, 1) of evading an incoming hit.
    """

    name: str
    min_damage: int
    max_damage: int
    evasion_probability: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("FighterStats.name must be a non-empty string")
        if self.min_damage <= 0:
            raise ValueError("min_damage must be >= 1")
        if self.max_damage < self.min_damage:
            raise ValueError("max_damage must be >= min_damage")
        if not (0.0 <= self.evasion_probability < 1.0):
            raise ValueError("evasion_probability must be within [0, 1)")


class Archetype(str, Enum):
    DEADPOOL = "deadpool"
    WOLVERINE = "wolverine"

    @property
    def stats(self) -> FighterStats:
        return ARCHETYPE_STATS[self]


ARCHETYPE_STATS: dict[Archetype, FighterStats] = {
    Archetype.DEADPOOL: FighterStats(name="Deadpool", min_damage=10, max_damage=100, evasion_probability=0.25),
    Archetype.WOLVERINE: FighterStats(name="Wolverine", min_damage=10, max_damage=120, evasion_probability=0.20),
}
