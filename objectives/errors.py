"""Exceptions raised while composing and achieving objectives."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Programming or configuration mistake that must not be recovered from."""


class StepExecutionError(RuntimeError):
    """Optional base for failures raised inside update steps.

    Nothing in the objective machinery wraps step failures; a step may raise
    this or any other exception and it reaches the caller unchanged.
    """


class UnachievableError(RuntimeError):
    """An objective can not be reached, e.g. because of a precondition cycle."""
