"""Host profile data structures."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterator, Optional, Tuple

DEFAULT_PORT = 22


@dataclass(frozen=True)
class HostProfile:
    """Fully merged connection parameters for one invocation."""

    host: str
    user: str = ""
    port: int = DEFAULT_PORT
    identity: str = ""

    @property
    def destination(self) -> str:
        """Get the ssh destination (user@host, or host alone)."""
        if self.user:
            return f"{self.user}@{self.host}"
        return self.host


@dataclass
class ProfileLayer:
    """
    One partial overlay of profile values.

    A field left as None is not set by this source and falls through
    to lower-precedence layers.
    """

    source: str
    host: Optional[str] = None
    user: Optional[str] = None
    port: Optional[Any] = None
    identity: Optional[str] = None

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Yield (field, value) for every field this layer sets."""
        for f in fields(self):
            if f.name == "source":
                continue
            value = getattr(self, f.name)
            if value is not None:
                yield f.name, value


PROFILE_FIELDS = tuple(f.name for f in fields(HostProfile))
