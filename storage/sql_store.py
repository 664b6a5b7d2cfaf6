"""SQLite engine shared by update steps and the achievement ledger."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from db_update.database import Database
from storage.schemas import Base


class SQLStore:
    """Owns the update database engine; steps get a `Database`, the ledger gets ORM sessions."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.engine = create_engine(f"sqlite+pysqlite:///{self.db_path}", future=True)
        self._session_factory = sessionmaker(bind=self.engine, future=True)

    def create_all(self) -> None:
        """Create the bookkeeping tables if missing; step tables are left to the steps."""
        Base.metadata.create_all(self.engine)

    def database(self) -> Database:
        """Handle passed to update steps through the environment."""
        return Database(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Ledger session that commits on success and rolls back on error."""
        sess = self._session_factory()
        try:
            yield sess
            sess.commit()
        except Exception:
            sess.rollback()
            raise
        finally:
            sess.close()
