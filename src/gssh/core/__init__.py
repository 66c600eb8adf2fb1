"""Profile discovery and resolution."""

from gssh.core.errors import (
    ConfigReadError,
    ExecutableNotFound,
    ExecutionError,
    GsshError,
    ValidationError,
)
from gssh.core.profile import HostProfile, ProfileLayer
from gssh.core.resolver import ProfileResolver, resolve_profile
from gssh.core.targets import find_target_file, list_all_targets, list_targets

__all__ = [
    "ConfigReadError",
    "ExecutableNotFound",
    "ExecutionError",
    "GsshError",
    "HostProfile",
    "ProfileLayer",
    "ProfileResolver",
    "ValidationError",
    "find_target_file",
    "list_all_targets",
    "list_targets",
    "resolve_profile",
]
