from dataclasses import replace

import pytest

from chunkheap.check import MemoryCheckError
from chunkheap.grades_e import scenario_095, scenario_096
from chunkheap.heap import chunk_size_for


@pytest.mark.parametrize(
    ("factory", "free_nodes", "total"),
    [(scenario_095, 9, 622560), (scenario_096, 10, 644768)],
)
def test_scenario_passes_check(factory, free_nodes, total):
    assert factory().run() == (total, free_nodes)


@pytest.mark.parametrize(
    ("factory", "name", "kept", "free_nodes", "total"),
    [
        (scenario_095, "095", 30, 9, 622560),
        (scenario_096, "096", 31, 10, 644768),
    ],
)
def test_scenario_metadata(factory, name, kept, free_nodes, total):
    scenario = factory()
    assert scenario.name == name
    assert scenario.free_list_size == free_nodes
    assert scenario.total_bytes == total
    keeps = [step for step in scenario.steps if step[0] == "keep"]
    assert sorted(step[1] for step in keeps) == list(range(kept))


@pytest.mark.parametrize("factory", [scenario_095, scenario_096])
def test_every_temporary_is_freed_once(factory):
    scenario = factory()
    temps = [step[1] for step in scenario.steps if step[0] == "temp"]
    frees = [step[1] for step in scenario.steps if step[0] == "free"]
    assert sorted(temps) == sorted(frees)
    assert len(set(frees)) == len(frees)


@pytest.mark.parametrize("factory", [scenario_095, scenario_096])
def test_expected_sizes_match_rounding(factory):
    scenario = factory()
    for step in scenario.steps:
        if step[0] == "keep":
            assert chunk_size_for(step[2]) == step[3]


@pytest.mark.parametrize(
    ("factory", "free_nodes", "total"),
    [(scenario_095, 9, 622560), (scenario_096, 10, 644768)],
)
def test_without_coalescing_free_list_is_longer(factory, free_nodes, total):
    scenario = factory()
    steps = tuple(step for step in scenario.steps if step[0] != "coalesce")
    unmerged = replace(scenario, steps=steps, free_list_size=None)
    nbytes, nodes = unmerged.run()
    assert nbytes == total
    assert nodes > free_nodes


@pytest.mark.parametrize("factory", [scenario_095, scenario_096])
def test_wrong_expected_size_is_reported(factory):
    scenario = factory()
    steps = list(scenario.steps)
    position = next(i for i, step in enumerate(steps) if step[0] == "keep")
    kind, index, nbytes, size = steps[position]
    steps[position] = (kind, index, nbytes, size + 8)
    tampered = replace(scenario, steps=tuple(steps))
    with pytest.raises(MemoryCheckError) as info:
        tampered.run()
    assert info.value.status == 1


@pytest.mark.parametrize("factory", [scenario_095, scenario_096])
def test_wrong_free_list_size_is_reported(factory):
    scenario = factory()
    wrong = replace(scenario, free_list_size=scenario.free_list_size + 1)
    with pytest.raises(MemoryCheckError) as info:
        wrong.run()
    assert info.value.status == 0


@pytest.mark.parametrize("factory", [scenario_095, scenario_096])
def test_wrong_total_is_reported(factory):
    scenario = factory()
    wrong = replace(scenario, total_bytes=scenario.total_bytes + 8192)
    with pytest.raises(MemoryCheckError, match="Total bytes"):
        wrong.run()


@pytest.mark.parametrize("factory", [scenario_095, scenario_096])
def test_double_free_is_rejected(factory):
    scenario = factory()
    steps = list(scenario.steps)
    position = next(i for i, step in enumerate(steps) if step[0] == "free")
    steps.insert(position + 1, steps[position])
    doubled = replace(scenario, steps=tuple(steps))
    with pytest.raises(ValueError, match="not allocated"):
        doubled.run()