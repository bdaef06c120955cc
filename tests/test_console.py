import io

import pytest

from duelsim.combat.archetypes import Archetype
from duelsim.combat.engine import EncounterResult, Outcome
from duelsim.combat.entities import AttackResult, Combatant
from duelsim.console import RETRY_MESSAGE, ConsoleNarrator, read_positive_int
from duelsim.errors import InputExhaustedError


def scripted_input(lines):
    it = iter(lines)
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    _input.prompts = prompts
    return _input


def test_accepts_first_valid_entry():
    out = io.StringIO()
    assert read_positive_int("HP: ", scripted_input(["42"]), out) == 42
    assert out.getvalue() == ""


def test_reprompts_until_positive_integer():
    fake = scripted_input(["abc", "-3", "0", "4.5", "+5", "", " 7 "])
    out = io.StringIO()

    value = read_positive_int("HP: ", fake, out)

    assert value == 7
    assert out.getvalue().splitlines() == [RETRY_MESSAGE] * 6
    assert fake.prompts == ["HP: "] * 7


def test_non_ascii_digits_are_rejected():
    out = io.StringIO()
    assert read_positive_int("HP: ", scripted_input(["٣", "3"]), out) == 3
    assert out.getvalue().count(RETRY_MESSAGE) == 1


def test_exhausted_input_is_fatal():
    with pytest.raises(InputExhaustedError):
        read_positive_int("HP: ", scripted_input(["nope"]), io.StringIO())


def test_narrator_damage_lines():
    out = io.StringIO()
    narrator = ConsoleNarrator(out)
    a = Combatant.from_archetype(Archetype.DEADPOOL, 10)
    b = Combatant.from_archetype(Archetype.WOLVERINE, 10)

    narrator.damage_dealt(b, a, AttackResult(evaded=False, damage=33, is_max_damage=False))
    narrator.damage_dealt(b, a, AttackResult(evaded=False, damage=120, is_max_damage=True))
    narrator.attack_evaded(b, a)

    assert out.getvalue().splitlines() == [
        "Damage: 33 to Deadpool.",
        "Damage: 120 to Deadpool (max damage! Deadpool will lose the next turn).",
        "Deadpool evaded the attack.",
    ]


def test_narrator_tie_line():
    out = io.StringIO()
    result = EncounterResult(outcome=Outcome.TIE, winner=None, loser=None, half_turns=3, final_hp={})

    ConsoleNarrator(out).battle_finished(result)

    assert out.getvalue().splitlines() == ["=== FINAL RESULT ===", "Tie: both fighters fell."]
