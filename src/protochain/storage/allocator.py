"""Object allocation service.

ObjectAllocator is a stateful service that manages ObjectId lifecycle.
"""

from __future__ import annotations

from protochain.core.identity import ObjectId


class ObjectAllocator:
    """Allocates object IDs with generation tracking for recycling.

    Maintains a free list of deallocated indices with incremented generations
    to safely reuse object IDs.
    """

    def __init__(self) -> None:
        self._next_index = 0
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> ObjectId:
        """Allocate new object ID, reusing recycled slots when available.

        Reused IDs carry an incremented generation number.

        Returns:
            Newly allocated ObjectId.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            return ObjectId(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return ObjectId(index=index, generation=0)

    def deallocate(self, obj: ObjectId) -> None:
        """Return object ID for reuse with incremented generation.

        Args:
            obj: Object ID to deallocate.

        Raises:
            ValueError: If the ID is not currently alive.
        """
        if not self.is_alive(obj):
            raise ValueError(f"Cannot deallocate {obj!r}: not alive")

        new_gen = obj.generation + 1
        self._generations[obj.index] = new_gen
        self._free_list.append((obj.index, new_gen))

    def is_alive(self, obj: ObjectId) -> bool:
        """Check if object ID is still valid (not recycled).

        Args:
            obj: Object ID to check.

        Returns:
            True if the ID's generation matches the current one for its index.
        """
        return self._generations.get(obj.index, -1) == obj.generation
