"""Shared infrastructure: random source and settings."""

from .rng import RNG, RandomSource

__all__ = ["RNG", "RandomSource"]
