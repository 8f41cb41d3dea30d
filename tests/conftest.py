"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from protochain import LocalObjectStore, PrototypeResolver, ResolverSettings


@pytest.fixture
def store():
    """Fresh LocalObjectStore instance."""
    return LocalObjectStore()


@pytest.fixture
def resolver(store):
    """PrototypeResolver over the fresh store with default settings."""
    return PrototypeResolver(store=store, settings=ResolverSettings())


@pytest.fixture
def shapes(resolver):
    """quad -> rect -> square chain with sides defined only on quad."""
    quad = resolver.create_from(None, sides=4)
    rect = resolver.create_from(quad)
    square = resolver.create_from(rect)
    return quad, rect, square
