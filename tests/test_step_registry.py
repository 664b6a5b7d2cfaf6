"""Step discovery and ordering tests."""

from __future__ import annotations

import pytest

from db_update.registry import StepRegistry, discover_steps
from objectives.errors import ConfigurationError


class ThreeSteps:
    def step_4(self, db: object) -> None:
        pass

    def step_1(self, db: object) -> None:
        pass

    def step_2(self, db: object) -> None:
        pass

    def helper(self) -> None:
        pass


class NoSteps:
    def migrate(self) -> None:
        pass


def test_discovery_sorts_steps_ascending() -> None:
    steps = discover_steps(ThreeSteps)

    assert list(steps) == [1, 2, 4]
    assert steps[4] == "step_4"


def test_discovery_of_class_without_steps_is_empty() -> None:
    assert discover_steps(NoSteps) == {}
    assert len(StepRegistry.discover(NoSteps())) == 0


@pytest.mark.parametrize("bad_name", ["step_0", "step_01", "step_abc", "step_", "step_-1", "step_1a"])
def test_malformed_step_numbers_are_rejected(bad_name: str) -> None:
    provider_cls = type("Broken", (ThreeSteps,), {bad_name: lambda self, db: None})

    with pytest.raises(ConfigurationError, match="odd looking number"):
        discover_steps(provider_cls)


def test_prefix_is_matched_without_case() -> None:
    provider_cls = type("Mixed", (), {"Step_3": lambda self, db: None})

    assert discover_steps(provider_cls) == {3: "Step_3"}


def test_duplicate_step_numbers_are_rejected() -> None:
    provider_cls = type(
        "Twice",
        (),
        {"step_1": lambda self, db: None, "STEP_1": lambda self, db: None},
    )

    with pytest.raises(ConfigurationError, match="same step number"):
        discover_steps(provider_cls)


def test_non_callable_attributes_are_ignored() -> None:
    provider_cls = type("WithAttr", (), {"step_count": 3, "step_2": lambda self, db: None})

    assert discover_steps(provider_cls) == {2: "step_2"}


def test_registry_navigation() -> None:
    registry = StepRegistry({9: "step_9", 1: "step_1", 5: "step_5"})

    assert registry.numbers() == [1, 5, 9]
    assert registry.steps_before(9) == [1, 5]
    assert registry.steps_before(1) == []
    assert registry.previous(9) == 5
    assert registry.previous(1) is None
    assert registry.last() == 9
    assert 5 in registry
    assert 2 not in registry


def test_registry_rejects_unknown_steps() -> None:
    registry = StepRegistry({1: "step_1"})

    with pytest.raises(ConfigurationError, match="Unknown database update step: 3"):
        registry.steps_before(3)
    with pytest.raises(ConfigurationError):
        registry.method_name(3)


def test_empty_registry_has_no_last_step() -> None:
    assert StepRegistry({}).last() is None
