"""Abstract base class for difference strategies.

This module defines the DiffStrategy interface that every way of deciding
content equality must implement.
"""

from abc import ABC, abstractmethod


class DiffStrategy(ABC):
    """Abstract base class for all difference strategies.

    A strategy decides whether two paths should be treated as having the
    same content. Files judged equal compare as equal regardless of their
    modification times.

    Example:
        >>> strategy = InternalByteCompare()
        >>> if not strategy.differs("a.txt", "b.txt"):
        ...     print("same content")
    """

    @abstractmethod
    def differs(self, a: str, b: str) -> bool:
        """Check whether the files at two paths are different.

        Args:
            a: First path.
            b: Second path.

        Returns:
            True if the files should be considered different.

        Raises:
            OSError: If reading either file fails for a reason other than
                the file not existing.
            ComparatorError: If an external comparator cannot give a verdict.
        """

    def is_available(self) -> bool:
        """Check if this strategy can run on the system.

        Returns:
            True unless the strategy depends on something missing.
        """
        return True
