"""Logging setup for the command line.

Library modules only create loggers; handlers are attached here, once, by
the CLI.
"""

import logging

from rich.logging import RichHandler

from fcmp.utils.formatting import err_console

_ROOT_LOGGER = "fcmp"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Args:
        verbose: If True, log at DEBUG level; otherwise only warnings.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=err_console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
