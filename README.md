# chunkheap

A small, self-contained model of a first-fit heap allocator. Memory is
simulated as integer addresses in a space that grows upward in arenas; no real
memory is touched.

## How the allocator behaves

- A request of `n` bytes becomes a chunk of `(n + 15) & ~7` bytes: an 8-byte
  header holding the chunk size, rounded up to a multiple of 8
  (see `chunkheap.heap.chunk_size_for`). A negative request raises
  `ValueError`.
- The free list is kept in address order and searched first-fit.
- When no free chunk is big enough, the heap grows by the chunk size or by the
  arena size (8192 by default), whichever is larger.
- When a chunk is split, the allocation is taken from its high end. If 16 bytes
  or fewer would be left, the whole chunk is handed out.
- `free` puts a chunk back on the free list; `coalesce` merges free chunks that
  are neighbours in memory.

## Using it

```python
from chunkheap.heap import Heap, chunk_size_for

heap = Heap()                      # Heap(base=0x10000, arena_size=8192)
p = heap.malloc(64)
assert heap.chunk_size(p) == chunk_size_for(64) == 72
assert heap.chunk_start(p) == p - 8

heap.free(p)
heap.coalesce()
print(heap.free_list())            # [(address, size), ...] in address order
```

`Heap(base, arena_size)` requires both values to be multiples of 8 (the arena
size positive, the base non-negative) and raises `ValueError` otherwise.

Freeing an address the heap did not hand out, or one already freed, raises
`HeapError`; so does asking `chunk_size` or `chunk_start` about an address that
is not behind a chunk.

## Checking a heap

`chunkheap.check.check_memory(heap, pointers, expected_sizes, free_list_size,
total_bytes)` confirms that:

- each pointer's chunk has the expected size,
- the pointers' chunks and the free chunks add up to `total_bytes`,
- the highest address minus the lowest equals `total_bytes`, and
- the free list holds `free_list_size` nodes (pass `-1` or `None` to skip this).

It raises `MemoryCheckError` on the first mismatch and otherwise returns
`(bytes_counted, free_list_nodes)`. The error's `status` is 1 for a chunk of
the wrong size and 0 for the other failures.

## Scenarios

A `Scenario` is a scripted workload. Its steps are tuples:

- `("keep", index, nbytes, expected_size)` allocates a pointer that is checked,
- `("temp", index, nbytes)` allocates a pointer that is freed later,
- `("free", index)` frees a temporary pointer,
- `("coalesce",)` merges neighbouring free chunks.

`Scenario.run()` replays the steps on a fresh heap and calls `check_memory` on
the kept pointers, in index order. Kept indices must run from 0 without gaps;
an unknown step or a free of an unknown temporary raises `ValueError`.

`chunkheap.check.basic_scenario()` allocates 64 bytes in one 8192-byte arena.
The larger workloads are `scenario_088()` and `scenario_098()` in
`chunkheap.grades_a`, `scenario_089()`/`scenario_090()` in `grades_b`,
`scenario_091()`/`scenario_093()` in `grades_c`, `scenario_092()`/`scenario_094()`
in `grades_d`, `scenario_095()`/`scenario_096()` in `grades_e`, and
`scenario_097()`/`scenario_099()` in `grades_f`.

```python
from chunkheap.grades_a import scenario_088

print(scenario_088().run())        # (582664, 10)
```

## Command line

```
chunkheap-check
```

This runs the basic scenario. It prints `Correct` when the check passes;
otherwise it prints `Error: ` followed by the failure and exits with the
error's status. The command takes no options other than `--help`.

## Tests

```
pip install -e .[test]
pytest
```