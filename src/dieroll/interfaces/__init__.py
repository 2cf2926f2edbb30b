"""Protocol-based interfaces for dieroll.

Custom randomness sources only need to satisfy these protocols; no
subclassing is required.
"""

from dieroll.interfaces.random_source import IRandomSource

__all__ = [
    "IRandomSource",
]
