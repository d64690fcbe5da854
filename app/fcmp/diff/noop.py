"""Difference strategy that never inspects file contents."""

from fcmp.diff.base import DiffStrategy


class NoOpStrategy(DiffStrategy):
    """Treat files as equal only when given the literal same path.

    No file is read. Two distinct path strings are always reported as
    different, even if they name the same file, so ordering falls through to
    existence and modification time. This makes the strategy asymmetric with
    respect to content: it cannot notice identical copies.
    """

    def differs(self, a: str, b: str) -> bool:
        return a != b

    def __repr__(self) -> str:
        return "NoOpStrategy()"
