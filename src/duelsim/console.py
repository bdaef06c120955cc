"""Console collaborators: reading starting health and printing the play-by-play."""
from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from .combat.engine import EncounterResult
from .combat.entities import AttackResult, Combatant
from .errors import InputExhaustedError

logger = logging.getLogger(__name__)

RETRY_MESSAGE = "Please enter a positive integer."


def read_positive_int(
    prompt: str,
    input_fn: Callable[[str], str] = input,
    output: Optional[TextIO] = None,
) -> int:
    """Prompt until the user enters a positive integer.

    Only plain ASCII digits are accepted (no sign, no decimal point). Invalid
    entries print a retry message and prompt again.

    Raises:
        InputExhaustedError: if the input stream ends.
    """
    out = output if output is not None else sys.stdout
    while True:
        try:
            line = input_fn(prompt)
        except EOFError as exc:
            raise InputExhaustedError("input ended before a positive integer was entered") from exc
        line = line.strip()
        if line.isascii() and line.isdigit() and int(line) > 0:
            return int(line)
        logger.debug("Rejected console entry %r", line)
        print(RETRY_MESSAGE, file=out)


class ConsoleNarrator:
    """Writes the duel play-by-play as plain text lines."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _emit(self, line: str) -> None:
        print(line, file=self.stream)

    def battle_started(self, a: Combatant, b: Combatant) -> None:
        self._emit("=== THE BATTLE BEGINS ===")

    def turn_started(self, turn_number: int, attacker: Combatant, defender: Combatant) -> None:
        self._emit(f"Turn {turn_number}: {attacker.name} attacks {defender.name}...")

    def turn_skipped(self, attacker: Combatant) -> None:
        self._emit(f"{attacker.name} is stunned and loses the turn.")

    def attack_evaded(self, attacker: Combatant, defender: Combatant) -> None:
        self._emit(f"{defender.name} evaded the attack.")

    def damage_dealt(self, attacker: Combatant, defender: Combatant, result: AttackResult) -> None:
        line = f"Damage: {result.damage} to {defender.name}"
        if result.is_max_damage:
            line += f" (max damage! {defender.name} will lose the next turn)"
        self._emit(line + ".")

    def health_snapshot(self, a: Combatant, b: Combatant) -> None:
        self._emit(f"HP => {a.name}: {a.hp} | {b.name}: {b.hp}")

    def battle_finished(self, result: EncounterResult) -> None:
        self._emit("=== FINAL RESULT ===")
        if result.winner is not None:
            self._emit(f"{result.winner} wins. {result.loser} fell to 0 or below HP.")
        else:
            self._emit("Tie: both fighters fell.")
