"""Object identity functionality: lightweight, recyclable object handles."""

from protochain.core.identity.models import ObjectId

__all__ = [
    "ObjectId",
]
