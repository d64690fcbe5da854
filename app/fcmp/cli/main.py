"""Main CLI application entry point.

Defines the Typer application: a single command that prints the most
recently modified of its path arguments.
"""

import logging
import shlex
from pathlib import Path
from typing import Annotated

import typer

from fcmp import __version__
from fcmp.core.compare import compare_all
from fcmp.core.config import ConfigError, FcmpConfig, load_config
from fcmp.core.errors import FcmpError
from fcmp.core.policy import MissingFilePolicy
from fcmp.diff.modes import DiffMode
from fcmp.utils.formatting import print_error, print_result, print_warning
from fcmp.utils.log import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="fcmp",
    help="Print the most recently modified of the given files.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fcmp version {__version__}")
        raise typer.Exit()


def _merge_options(
    config: FcmpConfig,
    *,
    reverse: bool | None,
    index: bool | None,
    diff: DiffMode | None,
    diff_command: str | None,
    missing: MissingFilePolicy | None,
) -> FcmpConfig:
    """Overlay command line options on the configuration.

    Options left unset keep the configured value.

    Raises:
        typer.BadParameter: If an option value is malformed or the resulting
            settings are inconsistent.
    """
    updates: dict[str, object] = {}
    if reverse is not None:
        updates["reverse"] = reverse
    if index is not None:
        updates["index"] = index
    if diff is not None:
        updates["diff"] = diff
    if diff_command is not None:
        updates["diff_command"] = _split_command(diff_command)
    if missing is not None:
        updates["missing"] = missing

    merged = config.model_copy(update=updates)
    if merged.diff == DiffMode.COMMAND and not merged.diff_command:
        msg = "--diff command requires --diff-command (or diff_command in the config file)"
        raise typer.BadParameter(msg, param_hint="--diff")
    if diff_command is not None and merged.diff != DiffMode.COMMAND:
        print_warning("--diff-command is ignored unless --diff command is selected")
    return merged


def _split_command(value: str) -> list[str]:
    """Split a comparator command line the way a POSIX shell would."""
    try:
        argv = shlex.split(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--diff-command") from None
    if argv and not argv[0].strip():
        msg = "empty executable"
        raise typer.BadParameter(msg, param_hint="--diff-command")
    return argv


@app.command()
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="File paths to compare.", show_default=False),
    ] = None,
    reverse: Annotated[
        bool | None,
        typer.Option(
            "--reverse/--no-reverse",
            "-r",
            help="Select the least recently modified file.",
            show_default=False,
        ),
    ] = None,
    index: Annotated[
        bool | None,
        typer.Option(
            "--index/--no-index",
            "-i",
            help="Print the index of the file rather than its path.",
            show_default=False,
        ),
    ] = None,
    diff: Annotated[
        DiffMode | None,
        typer.Option(
            "--diff",
            "-d",
            help="Consider files with the same content as equal, using this comparison.",
            case_sensitive=False,
            show_default=False,
        ),
    ] = None,
    diff_command: Annotated[
        str | None,
        typer.Option(
            "--diff-command",
            help="Comparator command line for --diff command; exit 0 = same, 1 = different.",
            show_default=False,
        ),
    ] = None,
    missing: Annotated[
        MissingFilePolicy | None,
        typer.Option(
            "--missing",
            "-m",
            help="How to treat missing files.",
            case_sensitive=False,
            show_default=False,
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Configuration file.", show_default=False),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Print the most recently modified of the given files.

    Missing files and files with identical content are handled according to
    --missing and --diff. Defaults come from ~/.config/fcmp/config.toml.
    """
    configure_logging(verbose)

    # Exit early if no paths to compare
    if not paths:
        return

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    settings = _merge_options(
        config,
        reverse=reverse,
        index=index,
        diff=diff,
        diff_command=diff_command,
        missing=missing,
    )
    strategy = settings.strategy()
    if not strategy.is_available():
        print_error(f"Comparator not found on PATH: {strategy!r}")
        raise typer.Exit(code=1)
    logger.debug(
        "Comparing %d paths with %r, missing=%s", len(paths), strategy, settings.missing.value
    )

    try:
        idx = compare_all(
            paths,
            reverse=settings.reverse,
            strategy=strategy,
            missing=settings.missing,
        )
    except (FcmpError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if settings.index:
        print_result(str(idx))
    else:
        print_result(paths[idx])


if __name__ == "__main__":
    app()
