"""Object identity models.

Usage:
    obj = ObjectId(index=42, generation=1)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ObjectId:
    """Lightweight object identifier with generation for safe handle reuse.

    The generation changes every time an index is recycled, so a handle kept
    around after its object was destroyed never aliases the new occupant.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))

    def __repr__(self) -> str:
        return f"ObjectId({self.index}v{self.generation})"
