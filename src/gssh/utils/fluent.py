"""Base class for single-use fluent builders."""

from typing import TypeVar, Generic

T = TypeVar("T")


class FluentBuilder(Generic[T]):
    """
    Base for builders whose setters return self and whose build() is final.

    Subclasses call _check_not_built() in every setter and _mark_built()
    in build(), so a builder cannot be changed after it produced a value:

        resolver = ProfileResolver().from_flags({"host": "box"})
        profile = resolver.build()
        resolver.from_flags({"host": "other"})  # RuntimeError
    """

    def __init__(self) -> None:
        self._built = False

    def _check_not_built(self) -> None:
        """Raise if build() has already been called."""
        if self._built:
            raise RuntimeError(
                f"{type(self).__name__} has already been built; create a new one"
            )

    def _mark_built(self) -> None:
        """Mark this builder as used."""
        self._built = True
