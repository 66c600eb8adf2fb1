"""Running the ssh client."""

from gssh.remote.process import find_executable, invoke
from gssh.remote.ssh import SSHCommand, build_ssh_args

__all__ = ["SSHCommand", "build_ssh_args", "find_executable", "invoke"]
