"""Objective interface consumed by the objective runner."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod

from objectives.environment import Environment


class Objective(ABC):
    """A desired state with a stable identity and the preconditions to reach it.

    Objectives are composed into a graph by returning other objectives from
    `get_preconditions`. A runner settles all preconditions first and then calls
    `achieve`. Two objectives with the same hash are the same objective.
    """

    @abstractmethod
    def get_hash(self) -> str:
        """Stable identity of the objective."""

    @abstractmethod
    def get_label(self) -> str:
        """Human readable description, for progress output only."""

    @abstractmethod
    def is_notable(self) -> bool:
        """Whether reaching this objective should be reported to the user."""

    @abstractmethod
    def get_preconditions(self, environment: Environment) -> list[Objective]:
        """Objectives that must be achieved before this one."""

    @abstractmethod
    def achieve(self, environment: Environment) -> Environment:
        """Reach the objective and return the (possibly extended) environment."""


def sha256_hex(*parts: str) -> str:
    """Digest of the given parts, used for objective hashes."""
    payload = "\x1f".join(parts).encode("utf-8")
    return hashlib.sha256(payload).hexdigest()


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"
