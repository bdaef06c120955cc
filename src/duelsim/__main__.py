from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from . import __version__
from .combat import Archetype, Combatant, Encounter, NullPacer, SleepPacer
from .console import ConsoleNarrator, read_positive_int
from .core.rng import RNG
from .core.settings import Settings
from .errors import InputExhaustedError, SettingsError
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from exc
    if n <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be a positive integer")
    return n


def _non_negative_float(value: str) -> float:
    try:
        n = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number") from exc
    if n < 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be non-negative")
    return n


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    a = Archetype.DEADPOOL.stats.name
    b = Archetype.WOLVERINE.stats.name
    parser = argparse.ArgumentParser(
        prog="duelsim",
        description=f"Turn-based duel simulator: {a} vs {b}",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--hp-a", type=_positive_int, default=None, help=f"Starting health for {a} (prompted if omitted)")
    parser.add_argument("--hp-b", type=_positive_int, default=None, help=f"Starting health for {b} (prompted if omitted)")
    parser.add_argument("--seed", type=int, default=None, help="Seed the random source (debugging only)")
    pause = parser.add_mutually_exclusive_group()
    pause.add_argument("--delay", type=_non_negative_float, default=None, help="Seconds to pause between turns")
    pause.add_argument("--no-pause", action="store_true", help="Do not pause between turns")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser.parse_args(argv)


def _verbosity_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def main(
    argv: Optional[list[str]] = None,
    input_fn: Callable[[str], str] = input,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    out = stdout if stdout is not None else sys.stdout
    configure_logging(_verbosity_level(args.verbose))

    try:
        settings = Settings.load(user_path=args.settings_path)
    except SettingsError as exc:
        logger.error("%s", exc)
        return 2
    # Honor CLI and env over the settings file
    if args.verbose == 0 and not os.getenv("DUEL_LOG_LEVEL"):
        logging.getLogger().setLevel(settings.logging.level)

    a_arch, b_arch = Archetype.DEADPOOL, Archetype.WOLVERINE
    try:
        hp_a = args.hp_a or read_positive_int(f"Starting health for {a_arch.stats.name}: ", input_fn, out)
        hp_b = args.hp_b or read_positive_int(f"Starting health for {b_arch.stats.name}: ", input_fn, out)
    except InputExhaustedError as exc:
        logger.critical("Input terminated: %s", exc)
        return 1

    seed = args.seed if args.seed is not None else settings.rng.seed
    rng = RNG(seed)
    if args.no_pause:
        pacer = NullPacer()
    else:
        delay = args.delay if args.delay is not None else settings.pacing.delay_seconds
        pacer = SleepPacer(delay)

    encounter = Encounter(
        Combatant.from_archetype(a_arch, hp_a, rng),
        Combatant.from_archetype(b_arch, hp_b, rng),
        narrator=ConsoleNarrator(out),
        pacer=pacer,
    )
    result = encounter.run()
    logger.info("Encounter finished after %d half-turns: %s", result.half_turns, result.outcome.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
