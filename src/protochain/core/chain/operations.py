"""Pure prototype chain operations.

All functions here are reads: they never mutate the source they walk.
"""

from __future__ import annotations

from collections.abc import Iterator

from protochain.core.chain.models import (
    NOT_FOUND,
    ChainCycleError,
    ChainDepthError,
    ChainSource,
    Resolution,
    validate_name,
)
from protochain.core.identity import ObjectId

DEFAULT_MAX_DEPTH = 1000


def walk_chain(
    source: ChainSource, obj: ObjectId, max_depth: int = DEFAULT_MAX_DEPTH
) -> Iterator[ObjectId]:
    """Iterate an object's prototype chain, starting with the object itself.

    Args:
        source: Where objects and their prototype links are stored.
        obj: Starting object.
        max_depth: Maximum number of objects to visit.

    Yields:
        Each ObjectId in chain order, nearest first.

    Raises:
        ChainCycleError: If an object appears twice.
        ChainDepthError: If more than max_depth objects would be visited.
    """
    seen: set[ObjectId] = set()
    current: ObjectId | None = obj
    while current is not None:
        if current in seen:
            raise ChainCycleError(f"Prototype chain of {obj!r} revisits {current!r}")
        if len(seen) >= max_depth:
            raise ChainDepthError(f"Prototype chain of {obj!r} exceeds {max_depth} objects")
        seen.add(current)
        yield current
        current = source.prototype_of(current)


def resolve(
    source: ChainSource, obj: ObjectId, name: str, max_depth: int = DEFAULT_MAX_DEPTH
) -> Resolution:
    """Resolve a property against an object and then its prototypes.

    The nearest definition wins, so own properties shadow inherited ones.

    Returns:
        Resolution carrying the value and its owner, or NOT_FOUND once the
        chain is exhausted.
    """
    validate_name(name)
    for current in walk_chain(source, obj, max_depth):
        result = source.get_own(current, name)
        if result.found:
            return result
    return NOT_FOUND


def find_owner(
    source: ChainSource, obj: ObjectId, name: str, max_depth: int = DEFAULT_MAX_DEPTH
) -> ObjectId | None:
    """Find which object in the chain defines `name`, if any."""
    return resolve(source, obj, name, max_depth).owner


def chain_keys(
    source: ChainSource, obj: ObjectId, max_depth: int = DEFAULT_MAX_DEPTH
) -> list[str]:
    """List every property name visible from `obj`.

    Names are ordered nearest-first (own keys in insertion order, then the
    prototype's, and so on) and a shadowed name appears only once.
    """
    keys: dict[str, None] = {}
    for current in walk_chain(source, obj, max_depth):
        for name in source.own_keys(current):
            keys.setdefault(name, None)
    return list(keys)
