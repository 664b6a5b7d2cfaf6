"""Discovery and ordering of numbered update step methods."""

from __future__ import annotations

import inspect
import re
from collections.abc import Iterator, Mapping

from objectives.errors import ConfigurationError

STEP_METHOD_PREFIX = "step_"

_STEP_NUMBER = re.compile(r"[1-9][0-9]*")


def discover_steps(provider_type: type, prefix: str = STEP_METHOD_PREFIX) -> dict[int, str]:
    """Map step numbers to the names of the step methods declared on a class.

    Every callable whose name starts with `prefix` (ignoring case) is a step and
    must carry a positive number without leading zeros after the prefix.
    """
    steps: dict[int, str] = {}
    for name, _member in inspect.getmembers(provider_type, callable):
        if not name.lower().startswith(prefix.lower()):
            continue
        suffix = name[len(prefix):]
        if not _STEP_NUMBER.fullmatch(suffix):
            raise ConfigurationError(
                f"Method {name} seems to be a step but has an odd looking number."
            )
        number = int(suffix)
        if number in steps:
            raise ConfigurationError(
                f"Methods {steps[number]} and {name} declare the same step number {number}."
            )
        steps[number] = name
    return dict(sorted(steps.items()))


class StepRegistry:
    """Ascending view over the steps of one provider."""

    def __init__(self, steps: Mapping[int, str]) -> None:
        self._steps: dict[int, str] = dict(sorted(steps.items()))

    @classmethod
    def discover(cls, provider: object, prefix: str = STEP_METHOD_PREFIX) -> StepRegistry:
        return cls(discover_steps(type(provider), prefix=prefix))

    def numbers(self) -> list[int]:
        return list(self._steps)

    def method_name(self, num: int) -> str:
        self._require(num)
        return self._steps[num]

    def steps_before(self, num: int) -> list[int]:
        """Steps that have to run before `num`, ascending."""
        self._require(num)
        before: list[int] = []
        for current in self._steps:
            if current == num:
                break
            before.append(current)
        return before

    def previous(self, num: int) -> int | None:
        before = self.steps_before(num)
        return before[-1] if before else None

    def last(self) -> int | None:
        return next(reversed(self._steps), None)

    def _require(self, num: int) -> None:
        if num not in self._steps:
            raise ConfigurationError(f"Unknown database update step: {num}")

    def __contains__(self, num: object) -> bool:
        return num in self._steps

    def __iter__(self) -> Iterator[int]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)
