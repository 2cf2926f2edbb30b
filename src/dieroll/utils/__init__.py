"""Utility functions for dieroll."""

from dieroll.utils.rng import SeededRandomSource, StdRandomSource, generate_seed

__all__ = [
    "SeededRandomSource",
    "StdRandomSource",
    "generate_seed",
]
