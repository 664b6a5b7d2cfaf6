"""Per-step progress reporting."""

from __future__ import annotations

from pydantic import BaseModel

from db_update.update_steps import DatabaseUpdateSteps
from objectives.base_objective import qualified_name


class StepStatus(BaseModel):
    """Whether one step of a provider has been achieved."""

    provider: str
    step: int
    objective_hash: str
    achieved: bool


def collect_status(
    providers: list[DatabaseUpdateSteps], achieved_hashes: set[str]
) -> list[StepStatus]:
    rows: list[StepStatus] = []
    for provider in providers:
        for num in provider.get_steps():
            step_hash = provider.get_step(num).get_hash()
            rows.append(
                StepStatus(
                    provider=qualified_name(type(provider)),
                    step=num,
                    objective_hash=step_hash,
                    achieved=step_hash in achieved_hashes,
                )
            )
    return rows
