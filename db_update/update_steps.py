"""Base class for consecutive database updates.

Implement update steps on one or more tables by subclassing
`DatabaseUpdateSteps` and adding methods that follow this schema:

    def step_1(self, db: Database) -> None:
        ...

Steps run in ascending order, each one exactly once, and only after the base
objective given to the constructor has been reached. Numbers do not need to be
contiguous but must never be reused or renumbered once released.

A provider that takes care of one table, or a small set of related tables, is
easier to maintain.
"""

from __future__ import annotations

from db_update.registry import StepRegistry
from db_update.step import DatabaseUpdateStep
from objectives.base_objective import Objective, qualified_name, sha256_hex
from objectives.environment import Environment


class DatabaseUpdateSteps(Objective):
    """Objective that is reached once every declared step has run."""

    def __init__(self, base: Objective) -> None:
        """`base` must be reached before the first step can even begin."""
        self.base = base
        self._registry: StepRegistry | None = None

    @property
    def registry(self) -> StepRegistry:
        if self._registry is None:
            self._registry = StepRegistry.discover(self)
        return self._registry

    def get_hash(self) -> str:
        """Hash over the class name and the contained step numbers."""
        return sha256_hex(
            "steps",
            qualified_name(type(self)),
            ",".join(str(num) for num in self.get_steps()),
        )

    def get_label(self) -> str:
        return f"Database update steps in {qualified_name(type(self))}"

    def is_notable(self) -> bool:
        return True

    def get_preconditions(self, environment: Environment) -> list[Objective]:
        _ = environment
        last = self.registry.last()
        if last is None:
            return [self.base]
        return [self.get_step(last)]

    def achieve(self, environment: Environment) -> Environment:
        return environment

    def get_steps(self) -> list[int]:
        """Numbers of the declared steps, ascending."""
        return self.registry.numbers()

    def get_step(self, num: int) -> DatabaseUpdateStep:
        """Get a database update step, raises ConfigurationError if unknown."""
        return DatabaseUpdateStep(self, num, self.registry.method_name(num))

    def get_preconditions_of_step(self, num: int) -> list[Objective]:
        previous = self.registry.previous(num)
        if previous is None:
            return [self.base]
        return [self.get_step(previous)]
