"""Utility functions and classes."""

from gssh.utils.paths import expand_path, get_home_hosts_dir
from gssh.utils.logging import setup_logging
from gssh.utils.shell import render_command

__all__ = ["expand_path", "get_home_hosts_dir", "render_command", "setup_logging"]
