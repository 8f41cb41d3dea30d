"""Core type definitions for protochain."""

type Copy[T] = T
"""Type alias indicating a value may be a copy that won't write back.

When `ResolverSettings.copy_on_read` is enabled, resolved values are deep
copies. Mutations to such a copy do NOT affect stored properties. To persist
changes, explicitly write back via `resolver.set_own(obj, name, value)`.
"""
