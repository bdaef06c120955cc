import sys
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


IntScript = Union[int, str]


class ScriptedRandom:
    """Deterministic RandomSource for tests.

    ``ints`` are returned by randint() in order; once exhausted ``int_default``
    is used, where "min"/"max" pick the requested bound. ``floats`` work the
    same way for random(). A missing default raises AssertionError so tests
    notice unexpected draws.
    """

    NEVER_EVADE = 0.99
    ALWAYS_EVADE = 0.0

    def __init__(
        self,
        ints: Iterable[IntScript] = (),
        floats: Iterable[float] = (),
        int_default: Optional[IntScript] = None,
        float_default: Optional[float] = None,
    ) -> None:
        self._ints: List[IntScript] = list(ints)
        self._floats: List[float] = list(floats)
        self.int_default = int_default
        self.float_default = float_default
        self.int_calls: List[tuple] = []
        self.float_calls = 0

    def randint(self, a: int, b: int) -> int:
        self.int_calls.append((a, b))
        if self._ints:
            value = self._ints.pop(0)
        elif self.int_default is not None:
            value = self.int_default
        else:
            raise AssertionError(f"unexpected randint({a}, {b}) draw")
        if value == "min":
            return a
        if value == "max":
            return b
        return int(value)

    def random(self) -> float:
        self.float_calls += 1
        if self._floats:
            return self._floats.pop(0)
        if self.float_default is not None:
            return self.float_default
        raise AssertionError("unexpected random() draw")


class CountingPacer:
    def __init__(self) -> None:
        self.waits = 0

    def wait(self) -> None:
        self.waits += 1


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def pacer() -> CountingPacer:
    return CountingPacer()


@pytest.fixture
def never_evade():
    return ScriptedRandom(float_default=ScriptedRandom.NEVER_EVADE)
