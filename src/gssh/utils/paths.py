"""Path expansion utilities."""

from pathlib import Path
from typing import Optional, Union

HOSTS_DIR_NAME = "hosts"


def expand_path(path: Union[str, Path]) -> Path:
    """Expand ~ in a path."""
    return Path(path).expanduser()


def get_home_hosts_dir(home: Optional[Path] = None) -> Path:
    """Get the per-user profile directory (~/hosts)."""
    return (home or Path.home()) / HOSTS_DIR_NAME


def same_location(a: Path, b: Path) -> bool:
    """Check whether two paths point at the same place on disk."""
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return False
