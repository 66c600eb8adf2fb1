"""
gssh - SSH host profile wrapper

Resolves a named host profile (YAML file, CLI flags, GSSH_* environment
variables) into an ssh invocation and runs it.
"""

__version__ = "1.0.1"

from gssh.core.profile import HostProfile
from gssh.core.resolver import ProfileResolver, resolve_profile
from gssh.remote.ssh import SSHCommand, build_ssh_args

__all__ = [
    "HostProfile",
    "ProfileResolver",
    "SSHCommand",
    "__version__",
    "build_ssh_args",
    "resolve_profile",
]
