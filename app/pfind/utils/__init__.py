"""Utility modules for pfind.

This module exports commonly used utility functions.
"""

from pfind.utils.formatting import (
    err_console,
    print_error,
    print_warning,
)

__all__ = [
    "err_console",
    "print_error",
    "print_warning",
]
