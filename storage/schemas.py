"""SQLAlchemy schemas for objective bookkeeping."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Return UTC datetime for default timestamps."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative base."""


class AchievedObjectiveRecord(Base):
    """Notable objectives that have been reached, keyed by their hash."""

    __tablename__ = "achieved_objectives"

    objective_hash: Mapped[str] = mapped_column(String(64), primary_key=True)
    label: Mapped[str] = mapped_column(Text)
    achieved_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
