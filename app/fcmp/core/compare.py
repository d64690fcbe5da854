"""Selection of the most (or least) recently modified file.

This module provides compare_all, which folds an ordered list of paths into
the index of the winning path in a single left-to-right pass.
"""

import logging
from collections.abc import Iterable

from fcmp.core.ordering import Ordering
from fcmp.core.policy import MissingFilePolicy
from fcmp.core.snapshot import FileSnapshot, resolve
from fcmp.diff.base import DiffStrategy
from fcmp.diff.noop import NoOpStrategy

logger = logging.getLogger(__name__)


def compare_all(
    paths: Iterable[str],
    *,
    reverse: bool = False,
    strategy: DiffStrategy | None = None,
    missing: MissingFilePolicy = MissingFilePolicy.OLDEST,
) -> int:
    """Find the index of the most recently modified path.

    Each path is observed once, when it is reached. The running best is
    replaced only when a candidate strictly beats it, so the earliest path
    wins ties in both directions. Comparisons without a basis (both files
    missing) keep the current best.

    Args:
        paths: Ordered, non-empty sequence of paths.
        reverse: If True, find the least recently modified path instead.
        strategy: Difference strategy; files it reports as not different
            compare equal. Defaults to NoOpStrategy.
        missing: Policy for paths that do not exist.

    Returns:
        Zero-based index into paths. If every path is ignored under the
        IGNORE policy, returns 0.

    Raises:
        ValueError: If paths is empty.
        MissingFileError: If a path is missing under the ERROR policy.
        ComparatorError: If an external comparator fails.
        OSError: For any other failure to read a file.
    """
    if strategy is None:
        strategy = NoOpStrategy()

    best_index = 0
    best: FileSnapshot | None = None
    seen = False

    for index, path in enumerate(paths):
        seen = True
        candidate = resolve(path, missing)
        if candidate is None:
            continue

        if best is None:
            best, best_index = candidate, index
            logger.debug("Initial candidate [%d]: %s", index, path)
            continue

        ordering = best.order(candidate, strategy, missing)
        if ordering is None:
            logger.debug("No basis to compare [%d] %s with %s", index, path, best.path)
            continue

        if not reverse:
            ordering = ordering.reverse()

        if ordering is Ordering.GREATER:
            logger.debug("Candidate [%d] %s replaces [%d] %s", index, path, best_index, best.path)
            best, best_index = candidate, index

    if not seen:
        msg = "No paths to compare"
        raise ValueError(msg)

    return best_index
