"""A single configurable die and the builder that produces it.

Dice are always created through :class:`DieBuilder`::

    die = builder().sides(20).build()
    die.roll()

Rolls draw from the half-open range ``[1, sides)``: the configured source is
asked for ``random_int(1, sides)``, so a six-sided die yields 1 through 5 and
never 6 with the default source. Custom sources receive the same bounds.

When history tracking is enabled (``Settings.history_enabled`` or the
``history=`` override) the builder returns a :class:`HistoryDie`, which keeps
every rolled value. A plain :class:`Die` has no history at all.
"""

from __future__ import annotations

import logging

from dieroll.config import Settings, get_settings
from dieroll.interfaces import IRandomSource
from dieroll.utils.rng import StdRandomSource

logger = logging.getLogger(__name__)


class Die:
    """A die with a fixed side count and its own randomness source."""

    def __init__(self, sides: int, rng: IRandomSource) -> None:
        self._sides = sides
        self._rng = rng

    @staticmethod
    def builder(settings: Settings | None = None, *, history: bool | None = None) -> DieBuilder:
        """Return a new DieBuilder with default configuration."""
        return DieBuilder(settings, history=history)

    @property
    def sides(self) -> int:
        return self._sides

    @property
    def random_source(self) -> IRandomSource:
        return self._rng

    def roll(self) -> int:
        """Roll the die using its own randomness source."""
        return self._rng.random_int(1, self._sides)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sides={self._sides}, rng={self._rng!r})"


class HistoryDie(Die):
    """A die that records every value it produces, in roll order."""

    def __init__(self, sides: int, rng: IRandomSource) -> None:
        super().__init__(sides, rng)
        self._history: list[int] = []

    def roll(self) -> int:
        value = super().roll()
        self._history.append(value)
        return value

    def get_history(self) -> list[int]:
        """Return a copy of all rolled values, oldest first."""
        return list(self._history)


class DieBuilder:
    """Fluent builder for :class:`Die`.

    Every setter returns the builder itself, and the last write to a field
    wins. Invalid side counts (anything but an int above 1) are ignored
    rather than rejected.

    ``build()`` hands the configured source over to the new die. A builder
    used again afterwards starts from a fresh default source, so no two dice
    ever share one.

    Args:
        settings: Settings to take defaults from (``get_settings()`` if omitted)
        history: Overrides ``settings.history_enabled`` when not ``None``
    """

    def __init__(self, settings: Settings | None = None, *, history: bool | None = None) -> None:
        if settings is None:
            settings = get_settings()
        self._sides: int = settings.default_sides
        self._rng: IRandomSource = StdRandomSource()
        self._history: bool = settings.history_enabled if history is None else history

    def sides(self, sides: int) -> DieBuilder:
        """Set the number of sides. Anything but an int of 2 or more is ignored."""
        # bool is an int subclass
        if isinstance(sides, int) and not isinstance(sides, bool) and sides > 1:
            self._sides = sides
        else:
            logger.debug("ignoring side count %r; keeping %d", sides, self._sides)
        return self

    def random_source(self, source: IRandomSource) -> DieBuilder:
        """Set the randomness source the die will draw from."""
        self._rng = source
        return self

    # Shorter alias.
    rng = random_source

    def build(self) -> Die:
        """Build a die from the current builder parameters."""
        die_cls = HistoryDie if self._history else Die
        die = die_cls(self._sides, self._rng)
        self._rng = StdRandomSource()
        logger.debug("built %r", die)
        return die


def builder(settings: Settings | None = None, *, history: bool | None = None) -> DieBuilder:
    """Return a new DieBuilder, the entry point for creating dice."""
    return DieBuilder(settings, history=history)
