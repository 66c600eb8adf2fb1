"""Human-readable rendering of command lines.

The output is for display (dry-run, verbose echo) only. Processes are
always started from a discrete argument list.
"""

from __future__ import annotations

from typing import Sequence

_QUOTE_TRIGGERS = (" ", "\t", '"', "'")


def needs_quoting(arg: str) -> bool:
    """Check whether an argument must be quoted for display."""
    return any(ch in arg for ch in _QUOTE_TRIGGERS)


def quote_arg(arg: str) -> str:
    """Wrap an argument in double quotes, escaping backslashes and quotes."""
    escaped = arg.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_command(name: str, args: Sequence[str]) -> str:
    """Render a command name and its arguments as a single line."""
    parts = [name]
    for arg in args:
        parts.append(quote_arg(arg) if needs_quoting(arg) else arg)
    return " ".join(parts)
