"""Storage backends."""

from protochain.storage.allocator import ObjectAllocator
from protochain.storage.local import LocalObjectStore
from protochain.storage.protocol import ObjectStore, PrototypeInUseError, UnknownObjectError

__all__ = [
    "ObjectStore",
    "LocalObjectStore",
    "ObjectAllocator",
    "UnknownObjectError",
    "PrototypeInUseError",
]
