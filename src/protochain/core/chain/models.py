"""Lookup result models and the minimal read interface chain walks need.

Usage:
    result = resolve(store, obj, "sides")
    if result:
        print(result.value, "defined on", result.owner)
    sides = result.value_or(0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from protochain.core.identity import ObjectId


class ChainCycleError(RuntimeError):
    """Raised when a prototype chain revisits an object."""

    pass


class ChainDepthError(RuntimeError):
    """Raised when a prototype chain is longer than the configured limit."""

    pass


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of a property lookup.

    A miss is an ordinary result, not an error: `found` is False and both
    `value` and `owner` are None. Truthiness follows `found`, so a property
    whose value is falsy (0, "", None) still counts as found.

    Attributes:
        found: Whether any object in the chain defines the property.
        value: The resolved value (None on a miss).
        owner: The object that defines the property (None on a miss).
    """

    found: bool
    value: Any = None
    owner: ObjectId | None = None

    def __bool__(self) -> bool:
        return self.found

    def value_or(self, default: Any) -> Any:
        """Return the resolved value, or `default` on a miss."""
        return self.value if self.found else default

    def unwrap(self) -> Any:
        """Return the resolved value.

        Raises:
            KeyError: If the lookup missed.
        """
        if not self.found:
            raise KeyError("property not found on prototype chain")
        return self.value


NOT_FOUND = Resolution(found=False)
"""Shared absent result returned by every lookup miss."""


class ChainSource(Protocol):
    """Read-only view of stored objects used by the chain algorithms."""

    def prototype_of(self, obj: ObjectId) -> ObjectId | None:
        """Get the prototype of an object (None for a root)."""
        ...

    def get_own(self, obj: ObjectId, name: str) -> Resolution:
        """Look up an own property without consulting the chain."""
        ...

    def own_keys(self, obj: ObjectId) -> tuple[str, ...]:
        """Own property names in insertion order."""
        ...


def validate_name(name: Any) -> str:
    """Check a property name is a non-empty string.

    Raises:
        TypeError: If name is not a str.
        ValueError: If name is empty.
    """
    if not isinstance(name, str):
        raise TypeError(f"Property name must be str, got {type(name).__name__}")
    if not name:
        raise ValueError("Property name must be non-empty")
    return name
