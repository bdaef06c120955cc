from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class Pacer(Protocol):
    """Waits one beat between half-turns. Presentation only."""

    def wait(self) -> None:  # pragma: no cover - protocol
        ...


class SleepPacer:
    """Block for a fixed delay between half-turns."""

    def __init__(self, delay_seconds: float = 1.0, sleep: Callable[[float], None] = time.sleep) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be non-negative")
        self.delay_seconds = float(delay_seconds)
        self._sleep = sleep

    def wait(self) -> None:
        if self.delay_seconds == 0.0:
            return
        self._sleep(self.delay_seconds)


class NullPacer:
    """Pacer that never blocks; used by tests and --no-pause."""

    def wait(self) -> None:
        return None


__all__ = ["Pacer", "SleepPacer", "NullPacer"]
