"""A first-fit allocator over a simulated, contiguously growing address space.

Every chunk starts with an 8-byte header holding its size. The pointer handed
to callers is the chunk address plus the header. Free chunks are kept in a
list ordered by address. New memory is taken from the top of the space in
arenas of at least ``arena_size`` bytes.
"""

from __future__ import annotations

from bisect import bisect_left, insort

HEADER_SIZE = 8
ALIGNMENT = 8
MIN_SPLIT_REMAINDER = 16
DEFAULT_ARENA_SIZE = 8192
DEFAULT_BASE = 0x10000


class HeapError(Exception):
    """Raised for an address the heap did not hand out, or one already freed."""


def chunk_size_for(nbytes: int) -> int:
    """Return the chunk size, header included, that a request of ``nbytes`` needs."""
    if nbytes < 0:
        raise ValueError(f"cannot allocate a negative number of bytes: {nbytes}")
    return (nbytes + HEADER_SIZE + ALIGNMENT - 1) & -ALIGNMENT


class Heap:
    """Simulated heap with an address-ordered free list."""

    def __init__(self, base: int = DEFAULT_BASE, arena_size: int = DEFAULT_ARENA_SIZE) -> None:
        if base < 0 or base % ALIGNMENT:
            raise ValueError(f"base address must be a non-negative multiple of {ALIGNMENT}")
        if arena_size <= 0 or arena_size % ALIGNMENT:
            raise ValueError(f"arena size must be a positive multiple of {ALIGNMENT}")
        self.base = base
        self.arena_size = arena_size
        self._break = base
        self._sizes: dict[int, int] = {}
        self._free: list[int] = []
        self._allocated: set[int] = set()

    def _grow(self, nbytes: int) -> int:
        start = self._break
        self._break += nbytes
        return start

    def _first_fit(self, size: int) -> int | None:
        return next((start for start in self._free if self._sizes[start] >= size), None)

    def _unlink(self, start: int) -> None:
        index = bisect_left(self._free, start)
        if index == len(self._free) or self._free[index] != start:
            raise HeapError(f"chunk 0x{start:x} is not on the free list")
        self._free.pop(index)

    def malloc(self, nbytes: int) -> int:
        """Allocate ``nbytes`` and return the address of the usable memory."""
        size = chunk_size_for(nbytes)
        start = self._first_fit(size)
        if start is None:
            grow = max(size, self.arena_size)
            start = self._grow(grow)
            self._sizes[start] = grow
            insort(self._free, start)

        leftover = self._sizes[start] - size
        if leftover <= MIN_SPLIT_REMAINDER:
            self._unlink(start)
            self._allocated.add(start)
            return start + HEADER_SIZE

        self._sizes[start] = leftover
        carved = start + leftover
        self._sizes[carved] = size
        self._allocated.add(carved)
        return carved + HEADER_SIZE

    def free(self, address: int) -> None:
        """Return the chunk behind ``address`` to the free list."""
        start = address - HEADER_SIZE
        if start not in self._allocated:
            raise HeapError(f"address 0x{address:x} is not an allocated chunk")
        self._allocated.remove(start)
        insort(self._free, start)

    def coalesce(self) -> None:
        """Merge free chunks that are neighbours in memory."""
        merged: list[int] = []
        for start in self._free:
            if merged and merged[-1] + self._sizes[merged[-1]] == start:
                self._sizes[merged[-1]] += self._sizes.pop(start)
            else:
                merged.append(start)
        self._free = merged

    def free_list(self) -> list[tuple[int, int]]:
        """Return the free chunks as ``(address, size)`` pairs in address order."""
        return [(start, self._sizes[start]) for start in self._free]

    def chunk_size(self, address: int) -> int:
        """Return the size recorded in the header of the chunk behind ``address``."""
        return self._sizes[self.chunk_start(address)]

    def chunk_start(self, address: int) -> int:
        """Return the address of the header of the chunk behind ``address``."""
        start = address - HEADER_SIZE
        if start not in self._sizes:
            raise HeapError(f"address 0x{address:x} does not belong to a chunk")
        return start