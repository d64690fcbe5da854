"""Missing-file policy.

Governs how a path that does not exist takes part in the comparison and in
the reduction over all paths.
"""

from enum import Enum

from fcmp.core.ordering import Ordering


class MissingFilePolicy(str, Enum):
    """Options for handling missing files.

    Attributes:
        OLDEST: Treat missing files as older than all others.
        NEWEST: Treat missing files as newer than all others.
        IGNORE: Drop missing files from the comparison entirely.
        ERROR: Fail as soon as a missing file is encountered.
    """

    OLDEST = "oldest"
    NEWEST = "newest"
    IGNORE = "ignore"
    ERROR = "error"

    @classmethod
    def parse(cls, value: str) -> "MissingFilePolicy":
        """Parse a policy name, ignoring case.

        Args:
            value: Policy name such as ``"oldest"`` or ``"Newest"``.

        Returns:
            The matching MissingFilePolicy.

        Raises:
            ValueError: If the name does not match any policy.
        """
        normalized = value.strip().lower()
        for policy in cls:
            if policy.value == normalized:
                return policy
        msg = "error parsing argument to option --missing"
        raise ValueError(msg)

    def missing_ordering(self) -> Ordering:
        """Ordering of a missing file against an existing one."""
        if self is MissingFilePolicy.NEWEST:
            return Ordering.GREATER
        return Ordering.LESS
