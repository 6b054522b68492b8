"""Main CLI application entry point.

Defines the Typer application. Tool options (``--workers``,
``--config``, ...) are regular Typer options; the find-style root and
modifiers are passed through untouched and parsed by
``pfind.cli.arguments``.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Annotated

import typer

from pfind import __version__
from pfind.cli.arguments import parse_arguments
from pfind.core.config import ConfigError, FinderConfig, load_config
from pfind.core.errors import ErrorKind, FindError
from pfind.search.engine import Finder
from pfind.utils.formatting import print_error, print_warning

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130
EXIT_BROKEN_PIPE = 141

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    name="pfind",
    help="Search a directory tree concurrently and print matching entries.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pfind version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Attach a stderr handler to the package logger.

    The handler is replaced on every call so it always writes to the
    current ``sys.stderr``.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    package_logger = logging.getLogger("pfind")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


@app.command(
    context_settings={"ignore_unknown_options": True},
    epilog="Modifiers: -type d|f, -name GLOB, -iname GLOB ('*' matches any run of characters).",
)
def main(
    args: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="[ROOT] [MODIFIERS]...",
            help="Directory to search followed by -type/-name/-iname modifiers.",
            show_default=False,
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            min=1,
            max=512,
            help="Maximum number of directories scanned at once.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Configuration file (default: ~/.config/pfind/config.toml).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Enable debug logging on stderr.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Print every entry under ROOT that matches all given modifiers."""
    configure_logging(verbose)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=int(ErrorKind.GENERIC)) from e

    try:
        request = parse_arguments(args or [], strict_type=config.strict_type)
        finder = Finder(request, max_workers=_effective_workers(workers, config))
        result = finder.run()
    except FindError as e:
        print_error(e.message)
        raise typer.Exit(code=e.exit_code) from e
    except KeyboardInterrupt:
        print_warning("Interrupted.")
        raise typer.Exit(code=EXIT_INTERRUPTED) from None
    except BrokenPipeError:
        # Reader went away (e.g. `pfind . | head`), nothing left to report to.
        _detach_stdout()
        raise typer.Exit(code=EXIT_BROKEN_PIPE) from None
    except OSError as e:
        print_error(f"Cannot write output: {e.strerror or e}")
        raise typer.Exit(code=int(ErrorKind.GENERIC)) from e

    if result.failed_directories:
        logger.debug("%d directories could not be read completely", len(result.failed_directories))


def _effective_workers(workers: int | None, config: FinderConfig) -> int | None:
    """Command-line worker count wins over the config file."""
    return workers if workers is not None else config.max_workers


def _detach_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush stays quiet."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        logger.debug("stdout has no file descriptor, leaving it as is")


if __name__ == "__main__":
    app()
