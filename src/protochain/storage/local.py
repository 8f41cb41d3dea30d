"""Local in-memory storage implementation.

Simple dict-based storage suitable for single-process use and testing.

Usage:
    store = LocalObjectStore()
    resolver = PrototypeResolver(store=store)
"""

from __future__ import annotations

import pickle  # nosec B403 - Used only for local testing/prototyping, not production
from collections.abc import Iterator
from typing import Any

from protochain.core.chain import NOT_FOUND, Resolution, validate_name
from protochain.core.identity import ObjectId
from protochain.storage.allocator import ObjectAllocator
from protochain.storage.protocol import PrototypeInUseError, UnknownObjectError


class LocalObjectStore:
    """Simple in-memory storage using nested dicts.

    Structure:
        _properties[obj][name] = value
        _prototypes[obj] = prototype ObjectId or None

    Prototype links are fixed at creation and must point at an object that
    is already alive, so no sequence of calls can build a cycle.
    """

    def __init__(self) -> None:
        self._allocator = ObjectAllocator()
        self._properties: dict[ObjectId, dict[str, Any]] = {}
        self._prototypes: dict[ObjectId, ObjectId | None] = {}

    def _require(self, obj: ObjectId) -> dict[str, Any]:
        """Get the own-property dict of a live object.

        Raises:
            UnknownObjectError: If obj is unknown or stale.
        """
        if not self.object_exists(obj):
            raise UnknownObjectError(f"Object {obj!r} does not exist")
        return self._properties[obj]

    def create_object(self, prototype: ObjectId | None = None) -> ObjectId:
        """Create a new object with empty own properties.

        Args:
            prototype: Object to delegate lookups to, or None for a root.

        Returns:
            Newly allocated ObjectId.

        Raises:
            UnknownObjectError: If prototype is unknown or stale.
        """
        if prototype is not None:
            self._require(prototype)
        obj = self._allocator.allocate()
        self._properties[obj] = {}
        self._prototypes[obj] = prototype
        return obj

    def destroy_object(self, obj: ObjectId) -> None:
        """Destroy an object and drop its own properties.

        Args:
            obj: Object to destroy.

        Raises:
            UnknownObjectError: If obj is unknown or stale.
            PrototypeInUseError: If a live object still delegates to obj.
        """
        self._require(obj)
        dependents = [child for child, proto in self._prototypes.items() if proto == obj]
        if dependents:
            raise PrototypeInUseError(
                f"Object {obj!r} is the prototype of {len(dependents)} live object(s)"
            )
        del self._properties[obj]
        del self._prototypes[obj]
        self._allocator.deallocate(obj)

    def object_exists(self, obj: ObjectId) -> bool:
        """Check if an object exists and is alive.

        Args:
            obj: Object to check.

        Returns:
            True if object exists and is alive, False otherwise.
        """
        return obj in self._properties and self._allocator.is_alive(obj)

    def all_objects(self) -> Iterator[ObjectId]:
        """Iterate over all alive objects.

        Yields:
            ObjectId for each alive object, in creation order.
        """
        for obj in list(self._properties):
            if self.object_exists(obj):
                yield obj

    def prototype_of(self, obj: ObjectId) -> ObjectId | None:
        """Get the prototype of an object.

        Raises:
            UnknownObjectError: If obj is unknown or stale.
        """
        self._require(obj)
        return self._prototypes[obj]

    def get_own(self, obj: ObjectId, name: str) -> Resolution:
        """Look up an own property.

        Args:
            obj: Object to inspect.
            name: Property name.

        Returns:
            Resolution owned by obj, or NOT_FOUND.
        """
        validate_name(name)
        properties = self._require(obj)
        if name in properties:
            return Resolution(found=True, value=properties[name], owner=obj)
        return NOT_FOUND

    def set_own(self, obj: ObjectId, name: str, value: Any) -> None:
        """Insert or overwrite an own property.

        Args:
            obj: Object to modify.
            name: Non-empty property name.
            value: Any value, including another ObjectId.
        """
        validate_name(name)
        self._require(obj)[name] = value

    def delete_own(self, obj: ObjectId, name: str) -> bool:
        """Delete an own property.

        Returns:
            True if the property was removed, False if not present.
        """
        validate_name(name)
        properties = self._require(obj)
        if name in properties:
            del properties[name]
            return True
        return False

    def has_own(self, obj: ObjectId, name: str) -> bool:
        """Check if an object defines a property itself."""
        validate_name(name)
        return name in self._require(obj)

    def own_keys(self, obj: ObjectId) -> tuple[str, ...]:
        """Own property names in insertion order."""
        return tuple(self._require(obj))

    def snapshot(self) -> bytes:
        """Pickle entire state for serialization.

        Not efficient - use only for testing/prototyping, not production.

        Returns:
            Pickled bytes of storage state.
        """
        return pickle.dumps(
            {
                "properties": self._properties,
                "prototypes": self._prototypes,
                "allocator_next": self._allocator._next_index,
                "allocator_free": self._allocator._free_list,
                "allocator_generations": self._allocator._generations,
            }
        )

    def restore(self, data: bytes) -> None:
        """Restore from pickle snapshot.

        Args:
            data: Pickled bytes from previous snapshot() call.
        """
        state = pickle.loads(data)  # nosec B301 - Used only for local testing, not production
        self._properties = state["properties"]
        self._prototypes = state["prototypes"]
        self._allocator._next_index = state["allocator_next"]
        self._allocator._free_list = state["allocator_free"]
        self._allocator._generations = state["allocator_generations"]
