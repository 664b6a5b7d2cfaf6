"""Objectives built from plain callables and from groups of objectives."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from objectives.base_objective import Objective, sha256_hex
from objectives.environment import Environment

ObjectiveAction = Callable[[Environment], "Environment | None"]


class CallableObjective(Objective):
    """Objective whose `achieve` runs a callable.

    The callable may return a new environment or None to keep the current one.
    """

    def __init__(
        self,
        action: ObjectiveAction,
        label: str,
        notable: bool = False,
        preconditions: Iterable[Objective] = (),
    ) -> None:
        self.action = action
        self.label = label
        self.notable = notable
        self.preconditions = list(preconditions)

    def get_hash(self) -> str:
        return sha256_hex(
            "callable",
            self.label,
            *(objective.get_hash() for objective in self.preconditions),
        )

    def get_label(self) -> str:
        return self.label

    def is_notable(self) -> bool:
        return self.notable

    def get_preconditions(self, environment: Environment) -> list[Objective]:
        _ = environment
        return list(self.preconditions)

    def achieve(self, environment: Environment) -> Environment:
        result = self.action(environment)
        return environment if result is None else result


class ObjectiveCollection(Objective):
    """Reached once all contained objectives are reached."""

    def __init__(self, label: str, objectives: Iterable[Objective], notable: bool = False) -> None:
        self.label = label
        self.objectives = list(objectives)
        self.notable = notable

    def get_hash(self) -> str:
        return sha256_hex(
            "collection",
            *(objective.get_hash() for objective in self.objectives),
        )

    def get_label(self) -> str:
        return self.label

    def is_notable(self) -> bool:
        return self.notable

    def get_preconditions(self, environment: Environment) -> list[Objective]:
        _ = environment
        return list(self.objectives)

    def achieve(self, environment: Environment) -> Environment:
        return environment
