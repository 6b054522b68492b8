"""Rich console formatting utilities.

Diagnostics go to stderr through Rich. Matched paths are not printed
here: they are written as plain lines so the output stays pipeable.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_THEME = Theme(
    {
        "warning": "#f5b332",
        "error": "bold #f53263",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stderr.isatty():
        return "truecolor"
    return None


# Shared console instance for diagnostics
err_console = Console(theme=_THEME, stderr=True, color_system=_detect_color_system())


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}", highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}", highlight=False, soft_wrap=True)
