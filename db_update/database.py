"""Database handle handed to update steps."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Connection, Engine, inspect, text

from objectives.callable_objective import CallableObjective
from objectives.environment import Environment
from objectives.errors import UnachievableError

logger = logging.getLogger("dbu.database")


class Database:
    """Small SQLAlchemy facade for schema changes and data fixes."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Connection inside a transaction that commits on success and rolls back on error."""
        with self.engine.begin() as conn:
            yield conn

    def execute(self, sql: str, params: Mapping[str, Any] | None = None) -> int:
        """Run one statement in its own transaction and return the affected row count."""
        logger.debug("Executing: %s", sql)
        with self.transaction() as conn:
            result = conn.execute(text(sql), dict(params or {}))
            return result.rowcount

    def fetch_all(self, sql: str, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        with self.engine.connect() as conn:
            rows = conn.execute(text(sql), dict(params or {}))
            return [dict(row._mapping) for row in rows]

    def table_exists(self, table: str) -> bool:
        return inspect(self.engine).has_table(table)

    def column_exists(self, table: str, column: str) -> bool:
        if not self.table_exists(table):
            return False
        columns = inspect(self.engine).get_columns(table)
        return any(col["name"] == column for col in columns)

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))


def _check_database(environment: Environment) -> None:
    db = environment.get_resource(Environment.RESOURCE_DATABASE)
    if db is None:
        raise UnachievableError("No database configured in the environment.")
    db.ping()


def database_reachable_objective() -> CallableObjective:
    """Base objective for update steps: the configured database answers."""
    return CallableObjective(_check_database, "Database is reachable", notable=False)
