"""Three-valued ordering used by the comparison engine.

An ordering of ``None`` means the two sides could not be compared at all;
callers treat it as "no basis for comparison" rather than as equality.
"""

from enum import IntEnum
from typing import Any


class Ordering(IntEnum):
    """Result of comparing two file observations.

    Attributes:
        LESS: Left side is older (or otherwise ranks lower).
        EQUAL: Both sides rank the same.
        GREATER: Left side is newer (or otherwise ranks higher).
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        """Return the ordering seen from the other side."""
        return Ordering(-self.value)

    def then(self, other: "Ordering") -> "Ordering":
        """Chain two orderings, falling back to ``other`` on equality."""
        if self is Ordering.EQUAL:
            return other
        return self


def cmp(a: Any, b: Any) -> Ordering:
    """Compare two totally ordered values."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL
