"""Utility modules for fcmp.

This module exports commonly used utility functions.
"""

from fcmp.utils.formatting import (
    console,
    err_console,
    print_error,
    print_result,
    print_warning,
)
from fcmp.utils.log import configure_logging
from fcmp.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "configure_logging",
    "console",
    "err_console",
    "print_error",
    "print_result",
    "print_warning",
    "run_command",
]
