"""Discovery of host profile files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from gssh.core.errors import ConfigReadError
from gssh.utils.logging import get_logger
from gssh.utils.paths import expand_path, get_home_hosts_dir, same_location

# Order matters: when both exist in one directory, .yaml wins.
PROFILE_EXTENSIONS = (".yaml", ".yml")

_logger = get_logger("gssh.targets")


def _profile_entries(directory: Path) -> Iterable[Tuple[str, str, Path]]:
    """Yield (target name, lower-cased extension, path) for profile files."""
    for entry in directory.iterdir():
        if entry.is_dir():
            continue
        ext = entry.suffix.lower()
        if ext in PROFILE_EXTENSIONS:
            yield entry.stem, ext, entry


def list_targets(directory: Union[str, Path]) -> list[str]:
    """
    List target names in a directory.

    Only direct entries with a .yaml/.yml extension (any case) count;
    subdirectories are skipped.

    Args:
        directory: Directory to scan.

    Returns:
        Target names, sorted ascending.

    Raises:
        OSError: If the directory does not exist or cannot be read.
    """
    return sorted(name for name, _, _ in _profile_entries(expand_path(directory)))


def list_all_targets(directories: Iterable[Path]) -> list[Tuple[str, Path]]:
    """
    List targets across several directories, in search order.

    Directories that cannot be read contribute nothing.

    Returns:
        (target name, directory) pairs.
    """
    found = []
    for directory in directories:
        try:
            names = list_targets(directory)
        except OSError as e:
            _logger.debug(f"Skipping {directory}: {e}")
            continue
        found.extend((name, directory) for name in names)
    return found


def find_target_file(target: str, directories: Iterable[Path]) -> Path:
    """
    Locate the profile file for a target.

    The first directory containing a match wins.

    Raises:
        ConfigReadError: If no directory holds a profile for the target.
    """
    searched = []
    for directory in directories:
        searched.append(str(directory))
        try:
            matches = {
                ext: path
                for name, ext, path in _profile_entries(expand_path(directory))
                if name == target
            }
        except OSError as e:
            _logger.debug(f"Skipping {directory}: {e}")
            continue
        for ext in PROFILE_EXTENSIONS:
            if ext in matches:
                _logger.debug(f"Found profile for '{target}': {matches[ext]}")
                return matches[ext]

    raise ConfigReadError(
        target, f"no profile file found (searched: {', '.join(searched) or 'nothing'})"
    )


def profile_search_path(
    config_dir: Union[str, Path],
    home: Optional[Path] = None,
) -> list[Path]:
    """
    Get the ordered list of profile directories.

    Args:
        config_dir: Directory given by --config / GSSH_CONFIG.
        home: Home directory override.

    Returns:
        The configured directory followed by ~/hosts, without repeats.
    """
    dirs: list[Path] = []
    for candidate in (expand_path(config_dir), get_home_hosts_dir(home)):
        if any(same_location(candidate, d) for d in dirs):
            continue
        dirs.append(candidate)
    return dirs
