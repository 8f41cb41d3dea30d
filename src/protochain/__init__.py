"""protochain: prototype-based objects with explicit chain resolution.

Usage:
    from protochain import PrototypeResolver

    resolver = PrototypeResolver()
    quad = resolver.create_from(None, sides=4)
    rect = resolver.create_from(quad)
    square = resolver.create_from(rect)

    resolver.resolve(square, "sides").value  # 4
    resolver.has_own(square, "sides")        # False
"""

__version__ = "0.1.0"

# Core primitives
from protochain.core import (
    NOT_FOUND,
    ChainCycleError,
    ChainDepthError,
    Copy,
    ObjectId,
    Resolution,
)

# Configuration
from protochain.config import ResolverSettings

# Resolver
from protochain.resolver import (
    ObjectHandle,
    PrototypeResolver,
    ShadowingWarning,
)

# Storage
from protochain.storage import (
    LocalObjectStore,
    ObjectStore,
    PrototypeInUseError,
    UnknownObjectError,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "ObjectId",
    "Resolution",
    "NOT_FOUND",
    "ChainCycleError",
    "ChainDepthError",
    # Config
    "ResolverSettings",
    # Resolver
    "PrototypeResolver",
    "ObjectHandle",
    "ShadowingWarning",
    # Storage
    "ObjectStore",
    "LocalObjectStore",
    "UnknownObjectError",
    "PrototypeInUseError",
]
