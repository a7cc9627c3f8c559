"""Recycling allocator for integer indices."""

from __future__ import annotations


class FreeList:
    """Hands out indices, reusing released ones most-recent first."""

    def __init__(self) -> None:
        self._free: list[int] = []
        self._next = 0

    def allocate(self) -> int:
        """Return a free index."""
        if self._free:
            return self._free.pop()
        index = self._next
        self._next += 1
        return index

    def release(self, index: int) -> None:
        """Give back ``index``; raises IndexError if it was never handed out."""
        if index < 0 or index >= self._next:
            raise IndexError("Invalid index")
        self._free.append(index)

    def clear(self) -> None:
        """Forget all indices and start again from zero."""
        self._free.clear()
        self._next = 0

    def reserve(self, capacity: int) -> None:
        """Capacity hint for released indices; must not be negative."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")

    def size(self) -> int:
        """Number of indices ever handed out since the last clear."""
        return self._next

    def free_count(self) -> int:
        """Number of released indices waiting for reuse."""
        return len(self._free)