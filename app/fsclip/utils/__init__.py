"""Utility modules for fsclip.

This module exports commonly used utility functions.
"""

from fsclip.utils.formatting import (
    console,
    err_console,
    print_block,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "print_block",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
