"""Random number sources for dice.

Two implementations of :class:`dieroll.interfaces.IRandomSource` live here:

- ``StdRandomSource``: the default. Draws from Python's process-wide
  generator, with no seed handling exposed.
- ``SeededRandomSource``: owns a private generator seeded from an int or a
  string. The same seed always produces the same sequence, which makes
  rolls reproducible in tests and replays.

Both follow the half-open contract: ``random_int(low, high)`` returns a value
in ``[low, high)``.

Examples:
    >>> source = SeededRandomSource("game:1:opening_roll")
    >>> value = source.random_int(1, 6)
    >>> 1 <= value < 6
    True
"""

from __future__ import annotations

import hashlib
import random


def _seed_to_int(seed: str) -> int:
    """Convert seed string to a stable 64-bit integer for random.Random().

    Args:
        seed: Seed string

    Returns:
        64-bit integer derived from SHA-256(seed)
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    # Use first 8 bytes for a 64-bit integer
    return int.from_bytes(digest[:8], "big", signed=False)


def generate_seed(*parts: object) -> str:
    """Join seed components into a single seed string.

    Format: "part1:part2:...". Useful for deriving one seed per die from some
    outer state, e.g. ``generate_seed(game_id, turn, "attack")``.

    Examples:
        >>> generate_seed(1, 42, "morale_check")
        '1:42:morale_check'

    Raises:
        ValueError: If no parts are given
    """
    if not parts:
        raise ValueError("at least one seed part is required")

    return ":".join(str(part) for part in parts)


class StdRandomSource:
    """Uniform draw from the process-wide ``random`` generator."""

    def random_int(self, low: int, high: int) -> int:
        return random.randrange(low, high)

    def __repr__(self) -> str:
        return "StdRandomSource()"


class SeededRandomSource:
    """Deterministic uniform draw from a privately owned generator.

    Seeds of either type are hashed with SHA-256 via their string form, so the
    sequence does not depend on ``PYTHONHASHSEED`` and ``-5`` and ``5`` give
    different sequences.
    """

    def __init__(self, seed: int | str) -> None:
        self._seed = seed
        self._rng = random.Random(self._normalize(seed))

    @staticmethod
    def _normalize(seed: int | str) -> int:
        return _seed_to_int(str(seed))

    @property
    def seed(self) -> int | str:
        return self._seed

    def reseed(self, seed: int | str) -> None:
        """Restart the sequence from ``seed``."""
        self._seed = seed
        self._rng = random.Random(self._normalize(seed))

    def random_int(self, low: int, high: int) -> int:
        return self._rng.randrange(low, high)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed!r})"
