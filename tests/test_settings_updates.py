"""Update steps against a real SQLite database."""

from __future__ import annotations

from pathlib import Path

import pytest

from db_update.database import Database, database_reachable_objective
from executor.objective_runner import ObjectiveRunner
from objectives.environment import Environment
from objectives.errors import ConfigurationError, UnachievableError
from storage.achievement_ledger import AchievementLedger
from storage.sql_store import SQLStore
from updates.loader import load_provider
from updates.settings_table import SCHEMA_VERSION_KEY, SettingsTableUpdateSteps


def build(tmp_path: Path) -> tuple[Database, AchievementLedger, Environment]:
    store = SQLStore(db_path=tmp_path / "app.db")
    database = store.database()
    env = Environment().with_resource(Environment.RESOURCE_DATABASE, database)
    return database, AchievementLedger(store), env


def test_settings_steps_create_and_seed_table(tmp_path: Path) -> None:
    database, ledger, env = build(tmp_path)
    provider = SettingsTableUpdateSteps(database_reachable_objective())

    report = ObjectiveRunner(ledger=ledger).run_with_report(provider, env)

    assert database.table_exists("settings")
    assert database.column_exists("settings", "updated_at")
    rows = database.fetch_all("SELECT keyword, value FROM settings")
    assert rows == [{"keyword": SCHEMA_VERSION_KEY, "value": "3"}]
    assert len(report.achieved) == 4


def test_second_run_does_nothing(tmp_path: Path) -> None:
    database, ledger, env = build(tmp_path)
    runner = ObjectiveRunner(ledger=ledger)
    runner.run(SettingsTableUpdateSteps(database_reachable_objective()), env)

    report = runner.run_with_report(SettingsTableUpdateSteps(database_reachable_objective()), env)

    assert report.achieved == []
    assert [record.label for record in ledger.list_achieved(limit=10)]


def test_reachability_base_needs_database() -> None:
    provider = SettingsTableUpdateSteps(database_reachable_objective())

    with pytest.raises(UnachievableError, match="No database"):
        ObjectiveRunner().run(provider, Environment())


def test_load_provider_from_reference() -> None:
    base = database_reachable_objective()
    provider = load_provider("updates.settings_table:SettingsTableUpdateSteps", base)

    assert isinstance(provider, SettingsTableUpdateSteps)
    assert provider.base is base
    assert provider.get_steps() == [1, 2, 3]


@pytest.mark.parametrize(
    "reference",
    [
        "updates.settings_table",
        "updates.does_not_exist:Anything",
        "updates.settings_table:SCHEMA_VERSION_KEY",
        "core.config:DEFAULT_CONFIG",
    ],
)
def test_bad_provider_references(reference: str) -> None:
    with pytest.raises(ConfigurationError):
        load_provider(reference, database_reachable_objective())


def test_environment_rejects_duplicate_resources() -> None:
    env = Environment().with_resource("a", 1)

    with pytest.raises(ConfigurationError):
        env.with_resource("a", 2)
    assert env.has_resource("a")
    assert Environment().get_resource("a") is None
