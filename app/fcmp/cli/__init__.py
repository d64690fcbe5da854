"""CLI package for fcmp.

This package contains the Typer application.
"""

from fcmp.cli.main import app

__all__ = ["app"]
