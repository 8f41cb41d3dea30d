"""Configuration settings using Pydantic Settings.

Provides typed resolver configuration with environment variable support.

Usage:
    from protochain.config import ResolverSettings

    # Load from environment variables (PROTOCHAIN_*)
    settings = ResolverSettings()

    # Or override with explicit values
    settings = ResolverSettings(warn_on_shadow=True)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolverSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for PrototypeResolver.

    Attributes:
        max_chain_depth: Longest prototype chain walked before giving up.
        warn_on_shadow: Emit ShadowingWarning when set_own hides an
            inherited property.
        copy_on_read: Deep-copy resolved values before returning them.

    Environment Variables:
        PROTOCHAIN_MAX_CHAIN_DEPTH
        PROTOCHAIN_WARN_ON_SHADOW
        PROTOCHAIN_COPY_ON_READ
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTOCHAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_chain_depth: int = Field(default=1000, ge=1)
    warn_on_shadow: bool = False
    copy_on_read: bool = False
