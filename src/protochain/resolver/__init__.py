"""Prototype resolver and object handles."""

from protochain.resolver.handle import ObjectHandle
from protochain.resolver.resolver import PrototypeResolver, ShadowingWarning

__all__ = [
    "PrototypeResolver",
    "ObjectHandle",
    "ShadowingWarning",
]
