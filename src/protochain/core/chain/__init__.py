"""Prototype chain functionality: pure lookup over any property source."""

from protochain.core.chain.models import (
    NOT_FOUND,
    ChainCycleError,
    ChainDepthError,
    ChainSource,
    Resolution,
    validate_name,
)
from protochain.core.chain.operations import chain_keys, find_owner, resolve, walk_chain

__all__ = [
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
