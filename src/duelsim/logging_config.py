import logging
import os
import sys


def configure_logging(default_level: int = logging.WARNING) -> None:
    """Configure the root logger to write diagnostics to stderr.

    Respects DUEL_LOG_LEVEL env var if present. Narration goes to stdout, so
    the two streams never interleave in redirected output.
    """
    level_name = os.getenv("DUEL_LOG_LEVEL")
    level = default_level
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"))

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
