from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..core.rng import RNG, RandomSource
from .archetypes import Archetype, FighterStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttackResult:
    """Result of one attack against an opponent."""

    evaded: bool
    damage: int
    is_max_damage: bool

    @property
    def stuns(self) -> bool:
        """True when the hit connected at max damage."""
        return self.is_max_damage and not self.evaded


@dataclass
class Combatant:
    """A duelist: fixed stats plus the mutable hp and stun state.

    Attributes:
        stats: Archetype stat block (name, damage range, evasion).
        hp: Current hit points. May drop below zero on the final hit.
        rng: Source of damage and evasion draws.
        stunned: Set by an opponent's connecting max-damage hit; cleared when
            the next turn of this combatant is skipped.
    """

    stats: FighterStats
    hp: int
    rng: RandomSource = field(default_factory=RNG, repr=False, compare=False)
    stunned: bool = False

    def __post_init__(self) -> None:
        try:
            self.hp = int(self.hp)
        except Exception as exc:
            raise ValueError("Combatant.hp must be an integer") from exc
        if self.hp <= 0:
            raise ValueError("Combatant.hp must start >= 1")

    @classmethod
    def from_archetype(
        cls, archetype: Archetype, hp: int, rng: Optional[RandomSource] = None
    ) -> "Combatant":
        return cls(stats=archetype.stats, hp=hp, rng=rng if rng is not None else RNG())

    @property
    def name(self) -> str:
        return self.stats.name

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def is_alive(self) -> bool:
        return self.alive

    def clear_stun(self) -> None:
        self.stunned = False

    def roll_damage(self) -> int:
        """Draw damage uniformly from the inclusive [min_damage, max_damage] range."""
        dmg = self.rng.randint(self.stats.min_damage, self.stats.max_damage)
        logger.debug("%s rolled %d damage", self.name, dmg)
        return dmg

    def resolve_evasion(self) -> bool:
        """Return True if this combatant evades the incoming hit."""
        roll = self.rng.random()
        evaded = roll < self.stats.evasion_probability
        logger.debug(
            "%s evasion roll %.6f vs %.2f -> %s",
            self.name,
            roll,
            self.stats.evasion_probability,
            "evaded" if evaded else "hit",
        )
        return evaded

    def receive_damage(self, amount: int) -> bool:
        """Try to evade, otherwise subtract ``amount`` from hp.

        Returns:
            True if the hit was evaded (hp unchanged), False otherwise.
        """
        if amount < 0:
            raise ValueError("Damage amount cannot be negative.")
        if self.resolve_evasion():
            return True
        self.hp -= amount
        logger.debug("%s takes %d damage (HP: %d)", self.name, amount, self.hp)
        return False

    def attack(self, opponent: "Combatant") -> AttackResult:
        """Roll damage and apply it to ``opponent``.

        A connecting max-damage hit stuns the opponent, unless the hit was
        lethal. The attacker itself is never modified.
        """
        if opponent is self:
            raise ValueError("A combatant cannot attack itself")
        damage = self.roll_damage()
        evaded = opponent.receive_damage(damage)
        result = AttackResult(evaded=evaded, damage=damage, is_max_damage=damage == self.stats.max_damage)
        if result.stuns and opponent.alive:
            opponent.stunned = True
            logger.debug("%s is stunned by a max-damage hit from %s", opponent.name, self.name)
        return result
