"""Storage protocol for swappable backends.

The storage layer holds own properties and prototype links, enabling:
- Local in-memory (default)
- Persistent (future)

Usage:
    store = LocalObjectStore()
    resolver = PrototypeResolver(store=store)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol

from protochain.core.chain import Resolution
from protochain.core.identity import ObjectId


class UnknownObjectError(KeyError):
    """Raised when an ObjectId is unknown or stale."""

    pass


class PrototypeInUseError(ValueError):
    """Raised when destroying an object other live objects delegate to."""

    pass


class ObjectStore(Protocol):
    """Abstract storage interface. Implementations handle actual data."""

    def create_object(self, prototype: ObjectId | None = None) -> ObjectId:
        """Allocate new object with empty own properties."""
        ...

    def destroy_object(self, obj: ObjectId) -> None:
        """Remove object and all its own properties."""
        ...

    def object_exists(self, obj: ObjectId) -> bool:
        """Check if object is alive."""
        ...

    def all_objects(self) -> Iterator[ObjectId]:
        """Iterate all living objects."""
        ...

    def prototype_of(self, obj: ObjectId) -> ObjectId | None:
        """Get the prototype link fixed at creation."""
        ...

    def get_own(self, obj: ObjectId, name: str) -> Resolution:
        """Look up an own property. Never consults the prototype."""
        ...

    def set_own(self, obj: ObjectId, name: str, value: Any) -> None:
        """Insert or overwrite an own property."""
        ...

    def delete_own(self, obj: ObjectId, name: str) -> bool:
        """Delete an own property. Returns True if existed."""
        ...

    def has_own(self, obj: ObjectId, name: str) -> bool:
        """Check if object defines property itself."""
        ...

    def own_keys(self, obj: ObjectId) -> tuple[str, ...]:
        """Own property names in insertion order."""
        ...

    def snapshot(self) -> bytes:
        """Serialize entire storage state."""
        ...

    def restore(self, data: bytes) -> None:
        """Restore from snapshot."""
        ...
