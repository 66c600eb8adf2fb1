"""Running the ssh client as a child process."""

from __future__ import annotations

import shutil
import signal
import subprocess
import threading
from contextlib import contextmanager
from typing import Iterator, Sequence

from gssh.core.errors import ExecutableNotFound, ExecutionError
from gssh.utils.logging import get_logger

_logger = get_logger("gssh.process")


def find_executable(name: str) -> str:
    """
    Locate an executable on PATH.

    Raises:
        ExecutableNotFound: If it is not on PATH.
    """
    path = shutil.which(name)
    if path is None:
        raise ExecutableNotFound(name)
    return path


@contextmanager
def _interrupts_ignored() -> Iterator[None]:
    """Ignore SIGINT in this process; the child decides what Ctrl-C means."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        # None means the handler was not installed from Python.
        signal.signal(signal.SIGINT, signal.SIG_DFL if previous is None else previous)


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return str(signum)


def invoke(executable: str, args: Sequence[str]) -> int:
    """
    Run an executable attached to this process's terminal and wait for it.

    stdin, stdout and stderr are inherited, not piped, so interactive
    sessions behave as if the child had been started directly. There is
    no timeout.

    Args:
        executable: Name to look up on PATH.
        args: Arguments, passed as a list and never through a shell.

    Returns:
        The child's exit code.

    Raises:
        ExecutableNotFound: If the executable is not on PATH.
        ExecutionError: If the child cannot be started or is killed by a signal.
    """
    path = find_executable(executable)
    _logger.debug(f"Executing {path} with {len(args)} argument(s)")

    try:
        proc = subprocess.Popen([path, *args])
    except OSError as e:
        raise ExecutionError(f"{executable} execution failed: {e}") from e

    # Installed after the spawn so the child starts with default SIGINT handling.
    with _interrupts_ignored():
        try:
            returncode = proc.wait()
        except OSError as e:
            raise ExecutionError(f"{executable} execution failed: {e}") from e

    if returncode < 0:
        raise ExecutionError(
            f"{executable} terminated by signal {_signal_name(-returncode)}"
        )

    _logger.debug(f"{executable} exited with code {returncode}")
    return returncode
