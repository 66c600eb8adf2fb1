"""Error kinds raised by gssh.

Every error carries the exit status the CLI should terminate with.
"""

from __future__ import annotations

EXIT_FAILURE = 1
EXIT_EXECUTION_FAILED = 125


class GsshError(Exception):
    """Base class for fatal gssh errors."""

    exit_code = EXIT_FAILURE


class ConfigReadError(GsshError):
    """A named target's profile file is missing or cannot be parsed."""

    def __init__(self, target: str, cause: object) -> None:
        self.target = target
        self.cause = cause
        # YAML errors span several lines; errors are reported on one.
        detail = " ".join(str(cause).split())
        super().__init__(f"failed to read config for target '{target}': {detail}")


class ValidationError(GsshError):
    """The merged profile is not usable."""


class ExecutableNotFound(GsshError):
    """The ssh client is not on the search path."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"{name} client not found in PATH. "
            f"Install the OpenSSH client and ensure '{name}' is available"
        )


class ExecutionError(GsshError):
    """The child could not be started or did not exit normally."""

    exit_code = EXIT_EXECUTION_FAILED
