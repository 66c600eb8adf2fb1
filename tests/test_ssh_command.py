from __future__ import annotations

import pytest

from gssh.core.profile import HostProfile
from gssh.remote.ssh import SSHCommand, build_ssh_args


def test_build_ssh_args_full_profile() -> None:
    profile = HostProfile(
        host="example.com", user="alice", port=2222, identity="/path/to/key"
    )

    args = build_ssh_args(profile, ["ls", "-l"])

    assert args == ["-i", "/path/to/key", "-p", "2222", "alice@example.com", "ls", "-l"]


def test_build_ssh_args_minimal_profile() -> None:
    assert build_ssh_args(HostProfile(host="host")) == ["host"]
    assert build_ssh_args(HostProfile(host="host"), []) == ["host"]


@pytest.mark.parametrize("port", [22, 0])
def test_build_ssh_args_never_emits_default_port(port: int) -> None:
    assert build_ssh_args(HostProfile(host="h", port=port)) == ["h"]


def test_build_ssh_args_keeps_tokens_separate() -> None:
    args = build_ssh_args(HostProfile(host="h"), ["echo", "hello world", "$HOME"])

    assert args == ["h", "echo", "hello world", "$HOME"]


def test_ssh_command_argv_and_render() -> None:
    cmd = SSHCommand(HostProfile(host="h", user="u", port=2200), ["echo", "hi there"])

    assert cmd.argv == ["ssh", "-p", "2200", "u@h", "echo", "hi there"]
    assert cmd.render() == 'ssh -p 2200 u@h echo "hi there"'


def test_ssh_command_run_uses_invoker(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_invoke(executable, args):
        calls.append((executable, list(args)))
        return 3

    monkeypatch.setattr("gssh.remote.ssh.invoke", fake_invoke)

    code = SSHCommand(HostProfile(host="h", identity="/k"), ["true"]).run()

    assert code == 3
    assert calls == [("ssh", ["-i", "/k", "h", "true"])]
