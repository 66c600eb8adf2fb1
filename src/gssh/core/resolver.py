"""Host profile resolution with layered precedence.

Layers are applied lowest to highest:

    defaults < profile file < environment (GSSH_*) < flags

Each field is resolved independently, so a field a higher layer does not
set falls through to the next one down.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Tuple

import yaml

from gssh.core.errors import ConfigReadError, ValidationError
from gssh.core.profile import DEFAULT_PORT, PROFILE_FIELDS, HostProfile, ProfileLayer
from gssh.core.targets import find_target_file
from gssh.utils.fluent import FluentBuilder
from gssh.utils.logging import get_logger

ENV_PREFIX = "GSSH"


def env_key(name: str, prefix: str = ENV_PREFIX) -> str:
    """Get the environment variable for a flag name (host -> GSSH_HOST)."""
    return f"{prefix}_{name.upper().replace('-', '_')}"


def read_env(name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Read a GSSH_* variable; unset and empty are both None."""
    environ = os.environ if environ is None else environ
    return environ.get(env_key(name)) or None


def _normalize_key(key: Any) -> str:
    return str(key).strip().lower().replace("-", "_")


class ProfileResolver(FluentBuilder["ProfileResolver"]):
    """
    Fluent builder that merges profile layers into a HostProfile.

    Example:
        profile = (
            ProfileResolver()
            .from_file(Path("hosts/ipa.yaml"))
            .from_env()
            .from_flags({"user": "root"})
            .build()
        )
    """

    def __init__(self) -> None:
        super().__init__()
        self._logger = get_logger("gssh.resolver")
        self._layers: list[ProfileLayer] = [
            ProfileLayer(source="defaults", port=DEFAULT_PORT),
        ]

    @property
    def layers(self) -> list[ProfileLayer]:
        """Get the layers in ascending precedence."""
        return list(self._layers)

    def with_layer(self, layer: ProfileLayer) -> ProfileResolver:
        """Add a layer above every layer added so far."""
        self._check_not_built()
        self._layers.append(layer)
        return self

    def from_file(self, path: Path, target: Optional[str] = None) -> ProfileResolver:
        """
        Add a layer read from a YAML profile file.

        Keys are case-insensitive and '-' is treated as '_'.

        Args:
            path: Profile file to read.
            target: Target name used in error messages (defaults to the file stem).

        Raises:
            ConfigReadError: If the file cannot be read or parsed.
        """
        target = target or path.stem
        try:
            # Bytes in; PyYAML detects the encoding and raises ReaderError on bad input.
            with open(path, "rb") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigReadError(target, e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigReadError(
                target, f"{path}: expected a mapping, got {type(data).__name__}"
            )

        values = {}
        for key, value in data.items():
            name = _normalize_key(key)
            if name not in PROFILE_FIELDS:
                self._logger.debug(f"Ignoring unknown key '{key}' in {path}")
                continue
            if isinstance(value, (list, dict)):
                raise ConfigReadError(target, f"{path}: '{key}' must be a scalar")
            values[name] = value

        self._logger.debug(f"Loaded profile for '{target}' from {path}")
        return self.with_layer(ProfileLayer(source=f"file:{path}", **values))

    def from_env(self, environ: Optional[Mapping[str, str]] = None) -> ProfileResolver:
        """Add a layer from GSSH_HOST, GSSH_USER, GSSH_PORT and GSSH_IDENTITY."""
        values = {name: read_env(name, environ) for name in PROFILE_FIELDS}
        return self.with_layer(ProfileLayer(source="env", **values))

    def from_flags(self, flags: Mapping[str, Any]) -> ProfileResolver:
        """
        Add a layer from command-line flags.

        A flag value of None means the flag was not given. An explicit
        empty string still overrides lower layers.
        """
        values = {name: flags.get(name) for name in PROFILE_FIELDS}
        return self.with_layer(ProfileLayer(source="flags", **values))

    def merged(self) -> dict[str, Tuple[Any, str]]:
        """Get the winning (value, source) for every field that is set."""
        result: dict[str, Tuple[Any, str]] = {}
        for layer in self._layers:
            for name, value in layer.items():
                result[name] = (value, layer.source)
        return result

    def build(self) -> HostProfile:
        """
        Validate the merged layers and produce the host profile.

        Raises:
            ValidationError: If host is empty or port is not an integer.
        """
        self._mark_built()
        merged = self.merged()
        for name, (value, source) in sorted(merged.items()):
            self._logger.debug(f"{name} = {value!r} (from {source})")

        host = _as_text(merged.get("host"))
        if not host:
            raise ValidationError(
                "host is required. Set --host, GSSH_HOST, or provide a target "
                "via --target with host in YAML"
            )

        port = _as_port(merged.get("port"))
        if port <= 0:
            port = DEFAULT_PORT

        return HostProfile(
            host=host,
            user=_as_text(merged.get("user")),
            port=port,
            identity=_as_text(merged.get("identity")),
        )


def _as_text(entry: Optional[Tuple[Any, str]]) -> str:
    if entry is None:
        return ""
    return str(entry[0])


def _as_port(entry: Optional[Tuple[Any, str]]) -> int:
    if entry is None:
        return DEFAULT_PORT
    value, source = entry
    if isinstance(value, bool):
        raise ValidationError(f"port must be an integer, got {value!r} from {source}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(
            f"port must be an integer, got {value!r} from {source}"
        ) from None


def resolve_profile(
    target: str,
    search_path: Iterable[Path],
    flags: Mapping[str, Any],
    environ: Optional[Mapping[str, str]] = None,
) -> HostProfile:
    """
    Resolve the host profile for one invocation.

    The profile file is only looked up when a target is named.

    Args:
        target: Profile name, or "" to skip the file layer.
        search_path: Directories to search for the profile file.
        flags: Flag values keyed by field name (None when not given).
        environ: Environment mapping (defaults to os.environ).

    Raises:
        ConfigReadError: If the target's profile cannot be found or read.
        ValidationError: If the merged profile is not usable.
    """
    resolver = ProfileResolver()
    if target:
        resolver.from_file(find_target_file(target, search_path), target=target)
    return resolver.from_env(environ).from_flags(flags).build()
