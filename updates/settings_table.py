"""Update steps for the `settings` table."""

from __future__ import annotations

from db_update.database import Database
from db_update.update_steps import DatabaseUpdateSteps

SCHEMA_VERSION_KEY = "schema_version"


class SettingsTableUpdateSteps(DatabaseUpdateSteps):
    """Key/value settings used by the application."""

    def step_1(self, db: Database) -> None:
        if db.table_exists("settings"):
            return
        db.execute(
            "CREATE TABLE settings ("
            " keyword VARCHAR(64) NOT NULL PRIMARY KEY,"
            " value TEXT NOT NULL DEFAULT ''"
            ")"
        )

    def step_2(self, db: Database) -> None:
        if not db.column_exists("settings", "updated_at"):
            db.execute("ALTER TABLE settings ADD COLUMN updated_at TIMESTAMP")

    def step_3(self, db: Database) -> None:
        # idempotent upsert
        db.execute(
            "INSERT INTO settings (keyword, value, updated_at)"
            " VALUES (:keyword, :value, CURRENT_TIMESTAMP)"
            " ON CONFLICT (keyword) DO UPDATE SET value = excluded.value,"
            " updated_at = excluded.updated_at",
            {"keyword": SCHEMA_VERSION_KEY, "value": "3"},
        )
