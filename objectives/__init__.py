"""Generic objective contract and building blocks."""

from objectives.base_objective import Objective
from objectives.callable_objective import CallableObjective, ObjectiveCollection
from objectives.environment import Environment
from objectives.errors import ConfigurationError, StepExecutionError, UnachievableError

__all__ = [
    "CallableObjective",
    "ConfigurationError",
    "Environment",
    "Objective",
    "ObjectiveCollection",
    "StepExecutionError",
    "UnachievableError",
]
