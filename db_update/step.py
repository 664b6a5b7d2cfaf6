"""Objective for a single database update step."""

from __future__ import annotations

from typing import TYPE_CHECKING

from objectives.base_objective import Objective, qualified_name, sha256_hex
from objectives.environment import Environment
from objectives.errors import UnachievableError

if TYPE_CHECKING:
    from db_update.update_steps import DatabaseUpdateSteps


class DatabaseUpdateStep(Objective):
    """Reached once step `number` of `parent` has been executed.

    Nodes are cheap and created on demand. The single precondition is looked up
    on the parent when requested.
    """

    def __init__(self, parent: DatabaseUpdateSteps, number: int, method_name: str) -> None:
        self.parent = parent
        self.number = number
        self.method_name = method_name

    def get_hash(self) -> str:
        return sha256_hex("step", qualified_name(type(self.parent)), str(self.number))

    def get_label(self) -> str:
        return f"Database update step {self.number} in {qualified_name(type(self.parent))}"

    def is_notable(self) -> bool:
        return True

    def get_preconditions(self, environment: Environment) -> list[Objective]:
        _ = environment
        return self.parent.get_preconditions_of_step(self.number)

    def achieve(self, environment: Environment) -> Environment:
        db = environment.get_resource(Environment.RESOURCE_DATABASE)
        if db is None:
            raise UnachievableError(
                f"{self.get_label()} needs a database in the environment."
            )
        getattr(self.parent, self.method_name)(db)
        return environment

    def __repr__(self) -> str:
        return f"DatabaseUpdateStep({qualified_name(type(self.parent))}, {self.number})"
