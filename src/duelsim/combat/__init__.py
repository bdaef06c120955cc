"""
Combat package for duelsim.

Contains:
- Fixed fighter archetypes (damage range and evasion chance).
- The Combatant with damage rolls, evasion and stun handling.
- The Encounter turn loop and its outcome.
- Pacing collaborators and an in-memory combat log.
"""

from .archetypes import ARCHETYPE_STATS, Archetype, FighterStats
from .entities import AttackResult, Combatant
from .engine import Encounter, EncounterResult, Narrator, Outcome, SilentNarrator
from .log import CombatEvent, CombatLog
from .pacing import NullPacer, Pacer, SleepPacer

__all__ = [
    "ARCHETYPE_STATS",
    "Archetype",
    "FighterStats",
    "AttackResult",
    "Combatant",
    "Encounter",
    "EncounterResult",
    "Narrator",
    "Outcome",
    "SilentNarrator",
    "CombatEvent",
    "CombatLog",
    "NullPacer",
    "Pacer",
    "SleepPacer",
]
