import dataclasses

import pytest

from chunkheap.check import MemoryCheckError
from chunkheap.grades_a import scenario_088, scenario_098


@pytest.mark.parametrize(
    ("factory", "expected"),
    [(scenario_088, (582664, 10)), (scenario_098, (560288, 8))],
)
def test_scenario_passes_check(factory, expected):
    assert factory().run() == expected


@pytest.mark.parametrize(("factory", "kept"), [(scenario_088, 28), (scenario_098, 27)])
def test_scenario_keeps_expected_pointer_count(factory, kept):
    steps = factory().steps
    assert sum(1 for step in steps if step[0] == "keep") == kept


@pytest.mark.parametrize("factory", [scenario_088, scenario_098])
def test_every_temporary_is_freed(factory):
    steps = factory().steps
    temps = sorted(step[1] for step in steps if step[0] == "temp")
    frees = sorted(step[1] for step in steps if step[0] == "free")
    assert temps == frees
    assert steps[-1] == ("coalesce",)


@pytest.mark.parametrize(
    ("factory", "expected"),
    [(scenario_088, (582664, 10)), (scenario_098, (560288, 8))],
)
def test_scenario_is_repeatable(factory, expected):
    scenario = factory()
    first = scenario.run()
    second = scenario.run()
    assert first == expected
    assert second == expected


def test_wrong_free_list_expectation_fails():
    bad = dataclasses.replace(scenario_088(), free_list_size=11)
    with pytest.raises(MemoryCheckError, match="should be 11"):
        bad.run()


def test_wrong_total_expectation_fails():
    bad = dataclasses.replace(scenario_098(), total_bytes=560296)
    with pytest.raises(MemoryCheckError, match="not 560296"):
        bad.run()


def test_scenario_names():
    assert scenario_088().name == "088"
    assert scenario_098().name == "098"