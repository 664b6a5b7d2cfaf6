"""Immutable resource environment passed between objectives."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from objectives.errors import ConfigurationError


class Environment:
    """Named resources that objectives can read and add to.

    Adding a resource never mutates an environment, it returns a new one.
    """

    RESOURCE_DATABASE = "resource_database"

    def __init__(self, resources: Mapping[str, Any] | None = None) -> None:
        self._resources: Mapping[str, Any] = MappingProxyType(dict(resources or {}))

    def get_resource(self, name: str) -> Any | None:
        return self._resources.get(name)

    def has_resource(self, name: str) -> bool:
        return name in self._resources

    def with_resource(self, name: str, value: Any) -> Environment:
        """Return a copy of this environment with one more resource."""
        if name in self._resources:
            raise ConfigurationError(f"Resource '{name}' is already contained in the environment.")
        return Environment({**self._resources, name: value})

    def resource_names(self) -> list[str]:
        return sorted(self._resources)

    def __repr__(self) -> str:
        return f"Environment(resources={self.resource_names()!r})"
