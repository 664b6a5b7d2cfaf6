"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.config import ensure_runtime_dirs, load_effective_config
from db_update.database import Database, database_reachable_objective
from db_update.update_steps import DatabaseUpdateSteps
from executor.audit_logger import AuditLogger
from executor.objective_runner import ObjectiveRunner
from objectives.callable_objective import ObjectiveCollection
from objectives.environment import Environment
from storage.achievement_ledger import AchievementLedger
from storage.sql_store import SQLStore
from updates.loader import load_providers


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    database: Database
    ledger: AchievementLedger
    runner: ObjectiveRunner
    providers: list[DatabaseUpdateSteps]
    environment: Environment

    def update_objective(self) -> ObjectiveCollection:
        """Aggregate objective over all configured providers."""
        return ObjectiveCollection("Database updates", self.providers)


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root)
        paths = ensure_runtime_dirs(self.root, config)

        sql_store = SQLStore(paths["db_path"])
        ledger = AchievementLedger(sql_store)
        database = sql_store.database()
        runner = ObjectiveRunner(
            ledger=ledger,
            audit_logger=AuditLogger(paths["audit_log_path"]),
        )
        base = database_reachable_objective()
        providers = load_providers(list(config.get("updates", {}).get("providers") or []), base)
        environment = Environment().with_resource(Environment.RESOURCE_DATABASE, database)

        return RuntimeBundle(
            config=config,
            database=database,
            ledger=ledger,
            runner=runner,
            providers=providers,
            environment=environment,
        )
