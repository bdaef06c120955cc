class DuelError(Exception):
    """Base error for duelsim domain exceptions."""


class InputExhaustedError(DuelError):
    """Raised when the console input stream ends before a value was accepted."""


class EncounterError(DuelError):
    """Raised when an encounter is used in a state that does not allow it."""


class DefeatedCombatantError(EncounterError, ValueError):
    """Raised when an encounter is created with a combatant that is already down."""


class SettingsError(DuelError):
    """Raised when a settings file cannot be read or holds invalid values."""
