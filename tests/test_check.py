import dataclasses

import pytest

from chunkheap.check import MemoryCheckError, Scenario, basic_scenario, check_memory, main
from chunkheap.heap import Heap, chunk_size_for


@pytest.fixture
def heap_with_one():
    heap = Heap()
    pointer = heap.malloc(64)
    return heap, pointer


def test_check_memory_accepts_consistent_heap(heap_with_one):
    heap, pointer = heap_with_one
    assert check_memory(heap, [pointer], [72], 1, 8192) == (8192, 1)


def test_check_memory_wrong_size_has_status_one(heap_with_one):
    heap, pointer = heap_with_one
    with pytest.raises(MemoryCheckError, match="wrong size") as info:
        check_memory(heap, [pointer], [80], 1, 8192)
    assert info.value.status == 1


def test_check_memory_wrong_total(heap_with_one):
    heap, pointer = heap_with_one
    with pytest.raises(MemoryCheckError, match="not 16384") as info:
        check_memory(heap, [pointer], [72], 1, 16384)
    assert info.value.status == 0


def test_check_memory_wrong_free_list_size(heap_with_one):
    heap, pointer = heap_with_one
    with pytest.raises(MemoryCheckError, match="nodes on the free list") as info:
        check_memory(heap, [pointer], [72], 2, 8192)
    assert info.value.status == 0


def test_check_memory_minus_one_skips_free_list_count(heap_with_one):
    heap, pointer = heap_with_one
    assert check_memory(heap, [pointer], [72], -1, 8192) == (8192, 1)


def test_check_memory_detects_gap():
    heap = Heap()
    kept = heap.malloc(64)
    lost = heap.malloc(64)
    with pytest.raises(MemoryCheckError, match="Total bytes"):
        check_memory(heap, [kept], [72], -1, 8192)
    heap.free(lost)
    assert check_memory(heap, [kept], [72], -1, 8192)[0] == 8192


def test_check_memory_length_mismatch(heap_with_one):
    heap, pointer = heap_with_one
    with pytest.raises(ValueError):
        check_memory(heap, [pointer], [72, 72], 1, 8192)


def test_basic_scenario_passes():
    assert basic_scenario().run() == (8192, 1)


def test_basic_scenario_with_wrong_expectation_fails():
    bad = dataclasses.replace(basic_scenario(), free_list_size=3)
    with pytest.raises(MemoryCheckError):
        bad.run()


def test_scenario_with_temporaries_and_coalesce():
    scenario = Scenario(
        name="mixed",
        steps=(
            ("temp", 0, 64),
            ("keep", 0, 100, chunk_size_for(100)),
            ("free", 0),
            ("coalesce",),
        ),
        free_list_size=2,
        total_bytes=8192,
    )
    assert scenario.run() == (8192, 2)


def test_scenario_rejects_unknown_step():
    scenario = Scenario("bad", (("grow", 1),), -1, 8192)
    with pytest.raises(ValueError, match="unknown step"):
        scenario.run()


def test_scenario_rejects_free_of_missing_temporary():
    scenario = Scenario("bad", (("free", 4),), -1, 8192)
    with pytest.raises(ValueError, match="not allocated"):
        scenario.run()


def test_scenario_rejects_gapped_keep_indices():
    scenario = Scenario("bad", (("keep", 1, 64, 72),), -1, 8192)
    with pytest.raises(ValueError, match="indices"):
        scenario.run()


def test_main_prints_correct(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "Correct"