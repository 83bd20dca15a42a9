import dataclasses

import pytest

from chunkheap.check import MemoryCheckError
from chunkheap.grades_c import scenario_091, scenario_093


@pytest.mark.parametrize(
    ("factory", "total", "nodes"),
    [(scenario_091, 622336, 13), (scenario_093, 600680, 14)],
)
def test_scenario_passes_check(factory, total, nodes):
    assert factory().run() == (total, nodes)


@pytest.mark.parametrize(("factory", "kept"), [(scenario_091, 30), (scenario_093, 29)])
def test_scenario_keeps_expected_pointer_count(factory, kept):
    steps = factory().steps
    indices = sorted(step[1] for step in steps if step[0] == "keep")
    assert indices == list(range(kept))


@pytest.mark.parametrize("factory", [scenario_091, scenario_093])
def test_every_temporary_is_freed_once(factory):
    steps = factory().steps
    temps = sorted(step[1] for step in steps if step[0] == "temp")
    freed = sorted(step[1] for step in steps if step[0] == "free")
    assert temps == freed
    assert len(set(temps)) == len(temps)


@pytest.mark.parametrize(("factory", "nodes"), [(scenario_091, 13), (scenario_093, 14)])
def test_wrong_free_list_size_is_reported(factory, nodes):
    scenario = dataclasses.replace(factory(), free_list_size=nodes + 1)
    with pytest.raises(MemoryCheckError) as info:
        scenario.run()
    assert info.value.status == 0


@pytest.mark.parametrize(
    ("factory", "total", "nodes"),
    [(scenario_091, 622336, 13), (scenario_093, 600680, 14)],
)
def test_free_list_size_check_can_be_skipped(factory, total, nodes):
    scenario = dataclasses.replace(factory(), free_list_size=-1)
    assert scenario.run() == (total, nodes)


@pytest.mark.parametrize("factory", [scenario_091, scenario_093])
def test_wrong_expected_size_is_reported(factory):
    scenario = factory()
    steps = list(scenario.steps)
    position = next(i for i, step in enumerate(steps) if step[0] == "keep")
    kind, index, nbytes, size = steps[position]
    steps[position] = (kind, index, nbytes, size + 8)
    broken = dataclasses.replace(scenario, steps=tuple(steps))
    with pytest.raises(MemoryCheckError) as info:
        broken.run()
    assert info.value.status == 1


@pytest.mark.parametrize("factory", [scenario_091, scenario_093])
def test_leaked_temporary_breaks_byte_total(factory):
    scenario = factory()
    steps = list(scenario.steps)
    position = next(i for i, step in enumerate(steps) if step[0] == "free")
    del steps[position]
    leaky = dataclasses.replace(scenario, steps=tuple(steps))
    with pytest.raises(MemoryCheckError, match="Total bytes"):
        leaky.run()


@pytest.mark.parametrize(
    ("factory", "total", "nodes"),
    [(scenario_091, 622336, 13), (scenario_093, 600680, 14)],
)
def test_without_coalescing_free_list_is_longer(factory, total, nodes):
    scenario = factory()
    steps = tuple(step for step in scenario.steps if step != ("coalesce",))
    uncoalesced = dataclasses.replace(scenario, steps=steps, free_list_size=-1)
    counted, free_nodes = uncoalesced.run()
    assert counted == total
    assert free_nodes > nodes


def test_scenario_names():
    assert scenario_091().name == "091"
    assert scenario_093().name == "093"