"""PrototypeResolver: central coordinator for objects and property lookup.

Usage:
    resolver = PrototypeResolver()

    quad = resolver.create_from(None, sides=4)
    rect = resolver.create_from(quad)
    square = resolver.create_from(rect)

    resolver.resolve(square, "sides").value  # 4, delegated to quad
    resolver.has_own(square, "sides")        # False
    resolver.set_own(square, "sides", 4)     # shadows quad.sides
"""

from __future__ import annotations

import copy
import warnings
from typing import Any

from protochain.config import ResolverSettings
from protochain.core.chain import (
    Resolution,
    chain_keys,
    find_owner,
    resolve,
    validate_name,
    walk_chain,
)
from protochain.core.identity import ObjectId
from protochain.core.types import Copy
from protochain.resolver.handle import ObjectHandle
from protochain.storage.local import LocalObjectStore
from protochain.storage.protocol import ObjectStore


class ShadowingWarning(UserWarning):
    """Emitted when an own property hides one inherited from a prototype."""

    pass


class PrototypeResolver:
    """Object creation and prototype-chain property resolution.

    Owns a storage backend and applies ResolverSettings to every lookup.
    Reads are pure; writes only ever touch the target object's own
    properties, never a prototype.
    """

    def __init__(
        self,
        store: ObjectStore | None = None,
        settings: ResolverSettings | None = None,
    ):
        self._store = store or LocalObjectStore()
        self._settings = settings or ResolverSettings()

    @property
    def store(self) -> ObjectStore:
        return self._store

    @property
    def settings(self) -> ResolverSettings:
        return self._settings

    # Creation

    def create_from(self, prototype: ObjectId | None, /, **properties: Any) -> ObjectId:
        """Create an object that delegates to `prototype`.

        Without keyword arguments the new object has no own properties and
        every read falls through to the chain. Keyword arguments become
        initial own properties.

        Args:
            prototype: Existing object to delegate to, or None for a root.
            **properties: Initial own properties.

        Returns:
            The new object's ObjectId.
        """
        obj = self._store.create_object(prototype)
        for name, value in properties.items():
            self._store.set_own(obj, name, value)
        return obj

    def destroy(self, obj: ObjectId) -> None:
        """Destroy an object. Fails while other objects delegate to it."""
        self._store.destroy_object(obj)

    # Lookup

    def resolve(self, obj: ObjectId, name: str) -> Resolution:
        """Resolve a property on `obj`, delegating up its prototype chain.

        Returns:
            Resolution with the nearest definition, or NOT_FOUND.
        """
        result = resolve(self._store, obj, name, self._settings.max_chain_depth)
        if result.found and self._settings.copy_on_read:
            return Resolution(found=True, value=copy.deepcopy(result.value), owner=result.owner)
        return result

    def get(self, obj: ObjectId, name: str, default: Any = None) -> Copy[Any]:
        """Resolve a property, returning `default` on a miss."""
        return self.resolve(obj, name).value_or(default)

    def has_own(self, obj: ObjectId, name: str) -> bool:
        """Check whether `obj` itself defines `name`. Never consults the chain."""
        return self._store.has_own(obj, validate_name(name))

    def has_property(self, obj: ObjectId, name: str) -> bool:
        """Check whether `name` is visible on `obj`, own or inherited."""
        return resolve(self._store, obj, name, self._settings.max_chain_depth).found

    def find_owner(self, obj: ObjectId, name: str) -> ObjectId | None:
        """Find the object in the chain that defines `name`."""
        return find_owner(self._store, obj, name, self._settings.max_chain_depth)

    # Mutation

    def set_own(self, obj: ObjectId, name: str, value: Any) -> None:
        """Insert or overwrite an own property on `obj`.

        Prototypes are never touched; an inherited property of the same name
        is shadowed from now on.
        """
        validate_name(name)
        if self._settings.warn_on_shadow and not self._store.has_own(obj, name):
            prototype = self._store.prototype_of(obj)
            if prototype is not None:
                owner = self.find_owner(prototype, name)
                if owner is not None:
                    warnings.warn(
                        f"Setting {name!r} on {obj!r} shadows the property inherited "
                        f"from {owner!r}",
                        ShadowingWarning,
                        stacklevel=2,
                    )
        self._store.set_own(obj, name, value)

    def delete_own(self, obj: ObjectId, name: str) -> bool:
        """Delete an own property so the inherited value (if any) shows again.

        Returns:
            True if `obj` had the property, False otherwise.
        """
        return self._store.delete_own(obj, validate_name(name))

    # Introspection

    def get_prototype_of(self, obj: ObjectId) -> ObjectId | None:
        return self._store.prototype_of(obj)

    def is_prototype_of(self, candidate: ObjectId, obj: ObjectId) -> bool:
        """Check whether `candidate` appears anywhere above `obj` in its chain."""
        chain = walk_chain(self._store, obj, self._settings.max_chain_depth)
        next(chain)  # skip obj itself
        return any(ancestor == candidate for ancestor in chain)

    def chain(self, obj: ObjectId) -> list[ObjectId]:
        """List `obj` followed by each of its prototypes, nearest first."""
        return list(walk_chain(self._store, obj, self._settings.max_chain_depth))

    def own_keys(self, obj: ObjectId) -> tuple[str, ...]:
        return self._store.own_keys(obj)

    def keys(self, obj: ObjectId) -> list[str]:
        """List every property name visible from `obj`, nearest first."""
        return chain_keys(self._store, obj, self._settings.max_chain_depth)

    def handle(self, obj: ObjectId) -> ObjectHandle:
        """Wrap `obj` for dict-style access."""
        return ObjectHandle(self, obj)
