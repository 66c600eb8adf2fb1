"""Main CLI entry point."""

from __future__ import annotations

import argparse
import sys

from gssh import __version__
from gssh.cli.formatters import print_error
from gssh.core.errors import GsshError
from gssh.core.resolver import read_env
from gssh.utils.logging import get_logger, setup_logging

DEFAULT_CONFIG_DIR = "hosts"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gssh",
        usage="%(prog)s [options] [--] [command ...]",
        description="Resolve a named host profile and run ssh against it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""\
Examples:
  gssh --list                    List available targets
  gssh -t ipa                    Open a shell on the 'ipa' target
  gssh -t ipa --dry-run          Print the ssh command without running it
  gssh -t ipa -- uptime          Run a command on the target
  gssh --host example.com --user root --port 2222

Profiles: <--config dir>/<target>.yaml, then ~/hosts/<target>.yaml
Environment: GSSH_TARGET, GSSH_CONFIG, GSSH_HOST, GSSH_USER, GSSH_PORT, GSSH_IDENTITY
Precedence: flags > environment > profile file > defaults
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"gssh {__version__}",
    )

    parser.add_argument(
        "-t", "--target",
        help="Target name (basename of a YAML file, e.g. 'ipa' for hosts/ipa.yaml)",
    )
    parser.add_argument(
        "-c", "--config",
        help=f"Directory containing host YAML files (default: {DEFAULT_CONFIG_DIR})",
    )
    parser.add_argument(
        "--host",
        help="Hostname or IP to connect to (overrides config)",
    )
    parser.add_argument(
        "--user",
        help="SSH user (overrides config)",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="SSH port (overrides config, default: 22)",
    )
    parser.add_argument(
        "-i", "--identity",
        help="Path to private key file (overrides config)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available targets and exit",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the ssh command that would be executed and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print the ssh command before running it and enable debug logging",
    )
    parser.add_argument(
        "command",
        nargs="*",
        help="Remote command to run (default: interactive shell)",
    )

    return parser


def _apply_env_defaults(args: argparse.Namespace) -> None:
    """Fill --target and --config from GSSH_TARGET / GSSH_CONFIG when not given."""
    if args.target is None:
        args.target = read_env("target") or ""
    if args.config is None:
        args.config = read_env("config") or DEFAULT_CONFIG_DIR


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")
    logger = get_logger("gssh.cli")
    logger.debug(f"gssh version {__version__}")

    _apply_env_defaults(args)

    from gssh.cli.commands.connect import cmd_connect
    from gssh.cli.commands.targets import cmd_list

    try:
        if args.list:
            return cmd_list(args)
        return cmd_connect(args)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except GsshError as e:
        print_error(str(e))
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
