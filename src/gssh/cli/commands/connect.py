"""Connect (and dry-run) command."""

from __future__ import annotations

import argparse

from gssh.utils.logging import get_logger

PROFILE_FLAGS = ("host", "user", "port", "identity")


def cmd_connect(args: argparse.Namespace) -> int:
    """Resolve the host profile, then run ssh (or just print it)."""
    from gssh.core.resolver import resolve_profile
    from gssh.core.targets import profile_search_path
    from gssh.remote.ssh import SSHCommand

    logger = get_logger("gssh.cli")

    search_path = profile_search_path(args.config)
    logger.debug(f"Profile search path: {', '.join(str(d) for d in search_path)}")

    flags = {name: getattr(args, name) for name in PROFILE_FLAGS}
    profile = resolve_profile(args.target, search_path, flags)

    command = SSHCommand(profile, args.command)

    if args.dry_run or args.verbose:
        print(command.render(), flush=True)

    if args.dry_run:
        return 0

    return command.run()
