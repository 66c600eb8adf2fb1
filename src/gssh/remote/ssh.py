"""SSH command construction and execution."""

from __future__ import annotations

from typing import Optional, Sequence

from gssh.core.profile import DEFAULT_PORT, HostProfile
from gssh.remote.process import invoke
from gssh.utils.shell import render_command

SSH_EXECUTABLE = "ssh"


def build_ssh_args(
    profile: HostProfile,
    remote_command: Optional[Sequence[str]] = None,
) -> list[str]:
    """
    Build the ssh argument list for a profile.

    Order is fixed: -i <identity>, -p <port>, destination, then the
    remote command tokens as separate arguments. Port 22 is never
    passed explicitly.
    """
    args = []

    if profile.identity:
        args.extend(["-i", profile.identity])

    if profile.port and profile.port != DEFAULT_PORT:
        args.extend(["-p", str(profile.port)])

    args.append(profile.destination)

    if remote_command:
        args.extend(remote_command)

    return args


class SSHCommand:
    """
    An ssh invocation for a resolved host profile.

    Example:
        cmd = SSHCommand(profile, ["uptime"])
        print(cmd.render())
        code = cmd.run()
    """

    def __init__(
        self,
        profile: HostProfile,
        remote_command: Optional[Sequence[str]] = None,
        executable: str = SSH_EXECUTABLE,
    ) -> None:
        self.profile = profile
        self.remote_command = list(remote_command or [])
        self.executable = executable

    @property
    def args(self) -> list[str]:
        """Get the arguments passed to the ssh client."""
        return build_ssh_args(self.profile, self.remote_command)

    @property
    def argv(self) -> list[str]:
        """Get the full argument vector, executable first."""
        return [self.executable, *self.args]

    def render(self) -> str:
        """Render the command line for display."""
        return render_command(self.executable, self.args)

    def run(self) -> int:
        """
        Run ssh attached to the current terminal.

        Returns:
            Exit code of the ssh client.
        """
        return invoke(self.executable, self.args)

    def __repr__(self) -> str:
        return f"SSHCommand({self.profile.destination!r})"
