"""Persistent record of achieved objectives."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import select

from storage.schemas import AchievedObjectiveRecord
from storage.sql_store import SQLStore


class AchievementRecord(BaseModel):
    """One achieved objective."""

    objective_hash: str
    label: str
    achieved_at: datetime


class AchievementLedger:
    """Remembers which objectives were reached in earlier runs."""

    def __init__(self, sql_store: SQLStore) -> None:
        self.sql_store = sql_store
        self.sql_store.create_all()

    def is_achieved(self, objective_hash: str) -> bool:
        with self.sql_store.session() as sess:
            return sess.get(AchievedObjectiveRecord, objective_hash) is not None

    def achieved_hashes(self) -> set[str]:
        with self.sql_store.session() as sess:
            return set(sess.scalars(select(AchievedObjectiveRecord.objective_hash)))

    def mark_achieved(self, objective_hash: str, label: str) -> None:
        with self.sql_store.session() as sess:
            if sess.get(AchievedObjectiveRecord, objective_hash) is None:
                sess.add(AchievedObjectiveRecord(objective_hash=objective_hash, label=label))

    def list_achieved(self, limit: int = 100) -> list[AchievementRecord]:
        stmt = (
            select(AchievedObjectiveRecord)
            .order_by(AchievedObjectiveRecord.achieved_at.desc())
            .limit(limit)
        )
        with self.sql_store.session() as sess:
            return [
                AchievementRecord(
                    objective_hash=row.objective_hash,
                    label=row.label,
                    achieved_at=row.achieved_at,
                )
                for row in sess.scalars(stmt)
            ]
