"""Target listing command."""

from __future__ import annotations

import argparse

from gssh.cli.formatters import print_info


def cmd_list(args: argparse.Namespace) -> int:
    """List available targets from every profile directory."""
    from gssh.core.targets import list_all_targets, profile_search_path

    found = list_all_targets(profile_search_path(args.config))

    if not found:
        print_info("No targets found.")
        return 0

    for name, directory in found:
        print(f"{name} ({directory})")

    return 0
