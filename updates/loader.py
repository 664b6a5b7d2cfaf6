"""Resolve configured update step providers."""

from __future__ import annotations

import importlib
import logging

from db_update.update_steps import DatabaseUpdateSteps
from objectives.base_objective import Objective
from objectives.errors import ConfigurationError

logger = logging.getLogger("dbu.updates")


def load_provider(reference: str, base: Objective) -> DatabaseUpdateSteps:
    """Instantiate a provider from a `package.module:ClassName` reference."""
    module_name, sep, class_name = reference.partition(":")
    if not sep or not module_name or not class_name:
        raise ConfigurationError(
            f"Provider reference '{reference}' must look like 'package.module:ClassName'."
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import provider module '{module_name}': {exc}") from exc

    provider_cls = getattr(module, class_name, None)
    if not isinstance(provider_cls, type) or not issubclass(provider_cls, DatabaseUpdateSteps):
        raise ConfigurationError(
            f"'{reference}' does not name a DatabaseUpdateSteps subclass."
        )
    logger.debug("Loaded update step provider %s", reference)
    return provider_cls(base)


def load_providers(references: list[str], base: Objective) -> list[DatabaseUpdateSteps]:
    return [load_provider(reference, base) for reference in references]
