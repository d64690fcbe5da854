"""Difference strategies.

This module provides the ways of deciding whether two files have the same
content: no inspection at all, in-process byte comparison, and delegation
to an external comparator such as ``cmp`` or ``diff``.
"""

from fcmp.diff.base import DiffStrategy
from fcmp.diff.external import ExternalProcess
from fcmp.diff.internal import DEFAULT_CHUNK_SIZE, InternalByteCompare
from fcmp.diff.modes import DiffMode, build_strategy
from fcmp.diff.noop import NoOpStrategy

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DiffMode",
    "DiffStrategy",
    "ExternalProcess",
    "InternalByteCompare",
    "NoOpStrategy",
    "build_strategy",
]
