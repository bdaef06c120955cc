from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Protocol

from ..errors import DefeatedCombatantError, EncounterError
from .entities import AttackResult, Combatant
from .log import CombatLog
from .pacing import Pacer, SleepPacer

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    A_WINS = "a_wins"
    B_WINS = "b_wins"
    TIE = "tie"


@dataclass(frozen=True)
class EncounterResult:
    """Terminal state of an encounter."""

    outcome: Outcome
    winner: Optional[str]
    loser: Optional[str]
    half_turns: int
    final_hp: Dict[str, int]


class Narrator(Protocol):
    """Receives the play-by-play of an encounter."""

    def battle_started(self, a: Combatant, b: Combatant) -> None: ...

    def turn_started(self, turn_number: int, attacker: Combatant, defender: Combatant) -> None: ...

    def turn_skipped(self, attacker: Combatant) -> None: ...

    def attack_evaded(self, attacker: Combatant, defender: Combatant) -> None: ...

    def damage_dealt(self, attacker: Combatant, defender: Combatant, result: AttackResult) -> None: ...

    def health_snapshot(self, a: Combatant, b: Combatant) -> None: ...

    def battle_finished(self, result: EncounterResult) -> None: ...


class SilentNarrator:
    """Narrator that discards everything."""

    def battle_started(self, a: Combatant, b: Combatant) -> None:
        pass

    def turn_started(self, turn_number: int, attacker: Combatant, defender: Combatant) -> None:
        pass

    def turn_skipped(self, attacker: Combatant) -> None:
        pass

    def attack_evaded(self, attacker: Combatant, defender: Combatant) -> None:
        pass

    def damage_dealt(self, attacker: Combatant, defender: Combatant, result: AttackResult) -> None:
        pass

    def health_snapshot(self, a: Combatant, b: Combatant) -> None:
        pass

    def battle_finished(self, result: EncounterResult) -> None:
        pass


class Encounter:
    """Alternating-turn duel between two combatants.

    Combatant ``a`` always opens. Each half-turn is either a skipped turn (the
    attacker was stunned) or one attack. The loop stops as soon as either side
    drops to 0 hp or below; there is no turn cap.

    An encounter runs once. Calling :meth:`run` again raises EncounterError.
    """

    def __init__(
        self,
        a: Combatant,
        b: Combatant,
        narrator: Optional[Narrator] = None,
        pacer: Optional[Pacer] = None,
        log: Optional[CombatLog] = None,
    ) -> None:
        if a is None or b is None:
            raise ValueError("both combatants must be provided")
        if a is b:
            raise ValueError("an encounter needs two distinct combatants")
        if a.name == b.name:
            raise ValueError(f"both combatants are named {a.name!r}; names must differ")
        for c in (a, b):
            if not c.alive:
                raise DefeatedCombatantError(f"{c.name} is already defeated (HP {c.hp})")
        self.a = a
        self.b = b
        self.narrator = narrator or SilentNarrator()
        self.pacer = pacer or SleepPacer()
        self.log = log or CombatLog()
        self.turn_number = 1
        self._result: Optional[EncounterResult] = None

    @property
    def finished(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Optional[EncounterResult]:
        return self._result

    def run(self) -> EncounterResult:
        """Play the duel to the end and return its terminal state."""
        if self.finished:
            raise EncounterError("encounter has already finished")

        logger.info("Encounter starting: %s (HP %d) vs %s (HP %d)", self.a.name, self.a.hp, self.b.name, self.b.hp)
        self.narrator.battle_started(self.a, self.b)
        self.narrator.health_snapshot(self.a, self.b)

        attacker, defender = self.a, self.b
        while self.a.alive and self.b.alive:
            self.process_turn(attacker, defender)
            if not (self.a.alive and self.b.alive):
                break
            self.pacer.wait()
            attacker, defender = defender, attacker

        return self._finish()

    def process_turn(self, attacker: Combatant, defender: Combatant) -> Optional[AttackResult]:
        """Resolve one half-turn. Returns None when the attacker was stunned."""
        if self.finished:
            raise EncounterError("encounter has already finished")
        if {id(attacker), id(defender)} != {id(self.a), id(self.b)}:
            raise ValueError("attacker and defender must be the two combatants of this encounter")
        n = self.turn_number
        self.narrator.turn_started(n, attacker, defender)
        self.log.add("turn", f"Turn {n}: {attacker.name} attacks {defender.name}", turn=n, attacker=attacker.name)

        if attacker.stunned:
            self.narrator.turn_skipped(attacker)
            attacker.clear_stun()
            self.log.add("skip", f"{attacker.name} is stunned and loses the turn.", turn=n, attacker=attacker.name)
            self.narrator.health_snapshot(self.a, self.b)
            self.turn_number += 1
            return None

        result = attacker.attack(defender)
        if result.evaded:
            self.narrator.attack_evaded(attacker, defender)
            self.log.add("evade", f"{defender.name} evaded the attack.", turn=n, defender=defender.name)
        else:
            self.narrator.damage_dealt(attacker, defender, result)
            self.log.add(
                "hit",
                f"{attacker.name} hits {defender.name} for {result.damage} damage (HP {defender.hp}).",
                turn=n,
                attacker=attacker.name,
                defender=defender.name,
                damage=result.damage,
                max_damage=result.is_max_damage,
                hp_after=defender.hp,
            )
            if defender.stunned:
                self.log.add("stun", f"{defender.name} will lose the next turn.", turn=n, defender=defender.name)
        self.narrator.health_snapshot(self.a, self.b)
        self.turn_number += 1
        return result

    def _finish(self) -> EncounterResult:
        a_alive, b_alive = self.a.alive, self.b.alive
        if a_alive and not b_alive:
            outcome, winner, loser = Outcome.A_WINS, self.a.name, self.b.name
        elif b_alive and not a_alive:
            outcome, winner, loser = Outcome.B_WINS, self.b.name, self.a.name
        else:
            # Unreachable: a half-turn only ever changes the defender's hp.
            outcome, winner, loser = Outcome.TIE, None, None

        result = EncounterResult(
            outcome=outcome,
            winner=winner,
            loser=loser,
            half_turns=self.turn_number - 1,
            final_hp={self.a.name: self.a.hp, self.b.name: self.b.hp},
        )
        self._result = result
        if winner is not None:
            message = f"{winner} wins. {loser} fell to 0 or below HP."
        else:
            message = "Tie: both fighters fell."
        self.log.add("outcome", message, outcome=outcome.value, half_turns=result.half_turns)
        self.narrator.battle_finished(result)
        self.narrator.health_snapshot(self.a, self.b)
        return result
