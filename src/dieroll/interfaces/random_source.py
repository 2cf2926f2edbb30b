"""Random Source Protocol Interface.

This module defines the protocol (interface) a die uses to draw its values.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IRandomSource(Protocol):
    """Protocol defining the integer draw a die relies on.

    Implementations are trusted by the caller. They are not required to check
    that ``low < high``; passing bad bounds is the caller's problem. A ``Die``
    always calls with ``low=1`` and ``high=sides`` where ``sides >= 2``.
    """

    def random_int(self, low: int, high: int) -> int:
        """Draw an integer from the half-open range ``[low, high)``.

        Args:
            low: Smallest value that may be returned (inclusive)
            high: Upper bound (exclusive)

        Returns:
            An integer ``v`` with ``low <= v < high``
        """
        ...
