"""Consistency checks over a heap and replayable allocation scenarios."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from chunkheap.heap import DEFAULT_ARENA_SIZE, DEFAULT_BASE, Heap


class MemoryCheckError(Exception):
    """Raised when a heap fails a consistency check.

    ``status`` is the exit status the check reports: 1 for a chunk of the
    wrong size, 0 for the other failures.
    """

    def __init__(self, message: str, status: int = 0) -> None:
        super().__init__(message)
        self.status = status


def check_memory(heap, pointers, expected_sizes, free_list_size, total_bytes):
    """Check that kept chunks and free chunks exactly tile ``total_bytes``.

    ``free_list_size`` of -1 or None skips the free-list length check.
    Returns ``(bytes_counted, free_list_nodes)``.
    """
    spans: list[tuple[int, int]] = []
    for number, (pointer, expected) in enumerate(zip(pointers, expected_sizes, strict=True)):
        start = heap.chunk_start(pointer)
        size = heap.chunk_size(pointer)
        if size != expected:
            raise MemoryCheckError(
                f"pointer number {number} the wrong size ({size} instead of {expected})",
                status=1,
            )
        spans.append((start, start + size))

    free = heap.free_list()
    spans.extend((start, start + size) for start, size in free)

    nbytes = sum(high - low for low, high in spans)
    if nbytes != total_bytes:
        raise MemoryCheckError(
            f"Total bytes allocated and on the free list = {nbytes}, not {total_bytes}"
        )

    low = min((start for start, _ in spans), default=0)
    high = max((end for _, end in spans), default=0)
    if high - low != total_bytes:
        raise MemoryCheckError(
            f"Highest address (0x{high:x}) minus lowest (0x{low:x}) does not equal {total_bytes}"
        )

    if free_list_size not in (None, -1) and len(free) != free_list_size:
        raise MemoryCheckError(
            f"{len(free)} nodes on the free list -- should be {free_list_size}"
        )
    return nbytes, len(free)


@dataclass(frozen=True)
class Scenario:
    """A scripted run of allocations and frees followed by a memory check.

    Steps are tuples:
    ``("keep", index, nbytes, expected_size)`` allocates a pointer that is checked,
    ``("temp", index, nbytes)`` allocates a pointer that is freed later,
    ``("free", index)`` frees a temporary pointer, and
    ``("coalesce",)`` merges neighbouring free chunks.
    """

    name: str
    steps: tuple
    free_list_size: int | None
    total_bytes: int
    arena_size: int = DEFAULT_ARENA_SIZE
    base: int = DEFAULT_BASE

    def run(self):
        """Replay the steps on a fresh heap and check it; return the check's result."""
        heap = Heap(self.base, self.arena_size)
        kept: dict[int, tuple[int, int]] = {}
        temporary: dict[int, int] = {}
        for step in self.steps:
            match step:
                case ("keep", index, nbytes, expected):
                    kept[index] = (heap.malloc(nbytes), expected)
                case ("temp", index, nbytes):
                    temporary[index] = heap.malloc(nbytes)
                case ("free", index):
                    if index not in temporary:
                        raise ValueError(f"{self.name}: temporary pointer {index} is not allocated")
                    heap.free(temporary.pop(index))
                case ("coalesce",):
                    heap.coalesce()
                case _:
                    raise ValueError(f"{self.name}: unknown step {step!r}")

        if set(kept) != set(range(len(kept))):
            raise ValueError(f"{self.name}: kept pointer indices are not 0..{len(kept) - 1}")
        ordered = [kept[index] for index in range(len(kept))]
        return check_memory(
            heap,
            [pointer for pointer, _ in ordered],
            [expected for _, expected in ordered],
            self.free_list_size,
            self.total_bytes,
        )


def basic_scenario() -> Scenario:
    """One 64-byte allocation inside a single 8192-byte arena."""
    return Scenario(
        name="basic",
        steps=(("keep", 0, 64, 72),),
        free_list_size=1,
        total_bytes=8192,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="chunkheap", description="Run the basic allocator consistency check."
    )
    parser.parse_args(argv)
    try:
        basic_scenario().run()
    except MemoryCheckError as err:
        print(f"Error: {err}")
        return err.status
    print("Correct")
    return 0