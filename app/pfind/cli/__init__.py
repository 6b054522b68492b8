"""CLI package for pfind.

This package contains the Typer application and the find-style
argument parser.
"""

from pfind.cli.main import app

__all__ = ["app"]
