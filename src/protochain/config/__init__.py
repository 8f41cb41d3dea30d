"""Configuration module using Pydantic Settings.

Usage:
    from protochain.config import ResolverSettings

    settings = ResolverSettings(max_chain_depth=64)
"""

from protochain.config.settings import ResolverSettings

__all__ = [
    "ResolverSettings",
]
