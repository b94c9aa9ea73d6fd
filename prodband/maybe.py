"""An optional value that is either present (valid) or absent."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """A value paired with a flag saying whether it may be used."""

    value: Optional[T] = None
    valid: bool = False

    def only_if(self, check: bool) -> "Maybe[T]":
        """Return a copy whose validity is set to ``check``."""
        return replace(self, valid=check)

    def then(self, value: T) -> "Maybe[T]":
        """Return a copy holding ``value``, keeping the current validity."""
        return replace(self, value=value)

    def or_else(self, default: T) -> Optional[T]:
        """Return the held value if valid, otherwise ``default``."""
        return self.value if self.valid else default

    def or_(self, other: "Maybe[T]") -> "Maybe[T]":
        """Return this instance if valid, otherwise ``other``."""
        return self if self.valid else other


def none() -> Maybe:
    """Return an invalid, empty Maybe."""
    return Maybe()


def this(value: T) -> Maybe[T]:
    """Return a valid Maybe holding ``value``."""
    return Maybe(value=value, valid=True)


def when(check: bool) -> Maybe:
    """Return an empty Maybe that is valid exactly when ``check`` is true."""
    return Maybe(valid=check)