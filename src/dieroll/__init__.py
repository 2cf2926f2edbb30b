"""dieroll: a single configurable die built with a fluent builder."""

from dieroll.config import Settings, get_settings
from dieroll.die import Die, DieBuilder, HistoryDie, builder
from dieroll.interfaces import IRandomSource
from dieroll.utils.rng import SeededRandomSource, StdRandomSource

__all__ = [
    "Die",
    "DieBuilder",
    "HistoryDie",
    "IRandomSource",
    "SeededRandomSource",
    "Settings",
    "StdRandomSource",
    "builder",
    "get_settings",
]
