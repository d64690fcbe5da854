"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from rich.console import Console
from rich.theme import Theme

_THEME = Theme(
    {
        "info": "#0ec1c8",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "path": "bold",
    }
)

# Shared console instances; results go to stdout, diagnostics to stderr
console = Console(theme=_THEME, highlight=False)
err_console = Console(theme=_THEME, stderr=True, highlight=False)


def print_result(value: str) -> None:
    """Print a result line without markup or wrapping."""
    console.print(value, markup=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print("[error]Error:[/] ", end="")
    err_console.print(message, markup=False, soft_wrap=True)
