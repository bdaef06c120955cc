"""
duelsim core package.

A two-fighter, turn-based duel simulator:
- Fixed fighter archetypes with asymmetric damage ranges and evasion chances
- A Combatant that rolls damage, resolves evasion and tracks the stunned status
- An Encounter that alternates half-turns until one fighter drops
- Console collaborators for reading starting health and narrating the duel

The CLI (``python -m duelsim``) composes these pieces.
"""
from .combat import (
    Archetype,
    AttackResult,
    Combatant,
    Encounter,
    EncounterResult,
    FighterStats,
    Outcome,
)
from .core.rng import RNG, RandomSource
from .errors import (
    DefeatedCombatantError,
    DuelError,
    EncounterError,
    InputExhaustedError,
    SettingsError,
)

__version__ = "0.1.0"

__all__ = [
    "Archetype",
    "AttackResult",
    "Combatant",
    "Encounter",
    "EncounterResult",
    "FighterStats",
    "Outcome",
    "RNG",
    "RandomSource",
    "DuelError",
    "DefeatedCombatantError",
    "EncounterError",
    "InputExhaustedError",
    "SettingsError",
    "__version__",
]
