from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CombatEvent:
    """A log event emitted during a duel.

    Event types: "turn", "skip", "evade", "hit", "stun", "outcome".
    """

    type: str
    message: str
    data: Optional[Dict[str, Any]] = None


class CombatLog:
    """Lightweight in-memory combat log to capture notable events."""

    def __init__(self) -> None:
        self._events: List[CombatEvent] = []

    def add(self, event_type: str, message: str, **data: Any) -> CombatEvent:
        ev = CombatEvent(type=event_type, message=message, data=data or None)
        self._events.append(ev)
        # Forward to standard logging for visibility if configured.
        if event_type == "outcome":
            logger.info(message)
        else:
            logger.debug(message)
        return ev

    def events(self) -> List[CombatEvent]:
        return list(self._events)

    def of_type(self, event_type: str) -> List[CombatEvent]:
        return [e for e in self._events if e.type == event_type]

    def __len__(self) -> int:
        return len(self._events)
