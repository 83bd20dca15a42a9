from collections import Counter
from dataclasses import replace

import pytest

from chunkheap.check import MemoryCheckError
from chunkheap.grades_d import scenario_092, scenario_094
from chunkheap.heap import chunk_size_for


def test_scenario_092_passes_check():
    assert scenario_092().run() == (620808, 13)


def test_scenario_094_passes_check():
    assert scenario_094().run() == (621112, 7)


@pytest.mark.parametrize("factory", [scenario_092, scenario_094])
def test_result_matches_declared_totals(factory):
    scenario = factory()
    assert scenario.run() == (scenario.total_bytes, scenario.free_list_size)


@pytest.mark.parametrize("factory", [scenario_092, scenario_094])
def test_expected_sizes_match_size_rule(factory):
    for step in factory().steps:
        if step[0] == "keep":
            _, _, nbytes, expected = step
            assert chunk_size_for(nbytes) == expected


@pytest.mark.parametrize("factory", [scenario_092, scenario_094])
def test_every_temporary_is_freed_once(factory):
    steps = factory().steps
    allocated = Counter(step[1] for step in steps if step[0] == "temp")
    freed = Counter(step[1] for step in steps if step[0] == "free")
    assert allocated == freed
    assert all(count == 1 for count in allocated.values())


@pytest.mark.parametrize("factory", [scenario_092, scenario_094])
def test_kept_indices_are_contiguous(factory):
    kept = sorted(step[1] for step in factory().steps if step[0] == "keep")
    assert kept == list(range(len(kept)))


@pytest.mark.parametrize("factory", [scenario_092, scenario_094])
def test_ends_with_coalesce(factory):
    assert factory().steps[-1] == ("coalesce",)


@pytest.mark.parametrize("factory", [scenario_092, scenario_094])
def test_without_coalesce_free_list_is_longer(factory):
    scenario = factory()
    uncoalesced = replace(scenario, steps=scenario.steps[:-1], free_list_size=None)
    nbytes, nodes = uncoalesced.run()
    assert nbytes == scenario.total_bytes
    assert nodes > scenario.free_list_size


@pytest.mark.parametrize("factory", [scenario_092, scenario_094])
def test_wrong_free_list_size_is_reported(factory):
    scenario = factory()
    broken = replace(scenario, free_list_size=scenario.free_list_size + 1)
    with pytest.raises(MemoryCheckError) as info:
        broken.run()
    assert info.value.status == 0
    assert "nodes on the free list" in str(info.value)


@pytest.mark.parametrize("factory", [scenario_092, scenario_094])
def test_wrong_total_is_reported(factory):
    scenario = factory()
    broken = replace(scenario, total_bytes=scenario.total_bytes + 8)
    with pytest.raises(MemoryCheckError) as info:
        broken.run()
    assert "Total bytes allocated" in str(info.value)


@pytest.mark.parametrize("factory", [scenario_092, scenario_094])
def test_wrong_expected_size_is_reported(factory):
    scenario = factory()
    steps = list(scenario.steps)
    position = next(i for i, step in enumerate(steps) if step[0] == "keep")
    kind, index, nbytes, expected = steps[position]
    steps[position] = (kind, index, nbytes, expected + 8)
    tampered = replace(scenario, steps=tuple(steps))
    with pytest.raises(MemoryCheckError) as info:
        tampered.run()
    assert info.value.status == 1
    assert f"pointer number {index} the wrong size" in str(info.value)


def test_names():
    assert (scenario_092().name, scenario_094().name) == ("092", "094")