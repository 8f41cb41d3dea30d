"""Core functionalities: stateless primitives and pure chain algorithms.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state
    mutation. For stateful services, see storage/ and resolver/.
"""

from protochain.core.chain import (
    NOT_FOUND,
    ChainCycleError,
    ChainDepthError,
    ChainSource,
    Resolution,
    chain_keys,
    find_owner,
    resolve,
    validate_name,
    walk_chain,
)
from protochain.core.identity import ObjectId
from protochain.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Identity
    "ObjectId",
    # Chain
    "Resolution",
    "NOT_FOUND",
    "ChainSource",
    "ChainCycleError",
    "ChainDepthError",
    "validate_name",
    "walk_chain",
    "resolve",
    "find_owner",
    "chain_keys",
]
