"""Output helpers for CLI commands.

Status messages carry a bracketed prefix so they stand apart from
listing and dry-run output. Errors go to stderr.
"""

from __future__ import annotations

import sys


def print_error(message: str) -> None:
    """Print an error message."""
    print(f"[!] error: {message}", file=sys.stderr)


def print_info(message: str) -> None:
    """Print an info message."""
    print(f"[*] {message}")
