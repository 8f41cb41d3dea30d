"""Object handle with ergonomic magic methods.

Usage:
    quad = resolver.handle(resolver.create_from(None, sides=4))
    square = quad.create_child()

    square["sides"]          # 4, inherited
    "sides" in square        # True, own or inherited
    square.has_own("sides")  # False
    square["sides"] = 4      # own property, shadows quad
    del square["sides"]      # inherited value shows through again
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from protochain.core.identity import ObjectId

if TYPE_CHECKING:
    from protochain.resolver.resolver import PrototypeResolver


class ObjectHandle:
    """Convenient wrapper for repeated single-object operations.

    Args:
        resolver: PrototypeResolver that owns the object.
        obj: ObjectId to wrap.
    """

    def __init__(self, resolver: PrototypeResolver, obj: ObjectId):
        self._resolver = resolver
        self._obj = obj

    @property
    def id(self) -> ObjectId:
        """Get the ObjectId this handle wraps."""
        return self._obj

    @property
    def prototype(self) -> ObjectHandle | None:
        """Handle for this object's prototype, or None for a root."""
        prototype = self._resolver.get_prototype_of(self._obj)
        if prototype is None:
            return None
        return ObjectHandle(self._resolver, prototype)

    def __getitem__(self, name: str) -> Any:
        """Resolve a property: h["sides"].

        Raises:
            KeyError: If no object in the chain defines name.
        """
        result = self._resolver.resolve(self._obj, name)
        if not result.found:
            raise KeyError(name)
        return result.value

    def __setitem__(self, name: str, value: Any) -> None:
        """Set an own property: h["sides"] = 4."""
        self._resolver.set_own(self._obj, name, value)

    def __delitem__(self, name: str) -> None:
        """Delete an own property: del h["sides"].

        Raises:
            KeyError: If the object does not define name itself.
        """
        if not self._resolver.delete_own(self._obj, name):
            raise KeyError(name)

    def __contains__(self, name: str) -> bool:
        """Check visibility, own or inherited: "sides" in h."""
        if not isinstance(name, str) or not name:
            return False
        return self._resolver.has_property(self._obj, name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectHandle):
            return NotImplemented
        return self._resolver is other._resolver and self._obj == other._obj

    def __hash__(self) -> int:
        return hash(self._obj)

    def __repr__(self) -> str:
        return f"ObjectHandle({self._obj!r})"

    def get(self, name: str, default: Any = None) -> Any:
        return self._resolver.get(self._obj, name, default)

    def has_own(self, name: str) -> bool:
        return self._resolver.has_own(self._obj, name)

    def keys(self) -> list[str]:
        return self._resolver.keys(self._obj)

    def own_keys(self) -> tuple[str, ...]:
        return self._resolver.own_keys(self._obj)

    def create_child(self, **properties: Any) -> ObjectHandle:
        """Create a new object whose prototype is this one."""
        child = self._resolver.create_from(self._obj, **properties)
        return ObjectHandle(self._resolver, child)
