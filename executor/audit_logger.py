"""Structured JSONL audit trail of objective outcomes."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from objectives.base_objective import Objective


class AuditLogger:
    """Writes objective outcomes as JSON lines."""

    def __init__(self, log_path: Path) -> None:
        self.log_path = log_path
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger("dbu.audit")

    def log(self, objective: Objective, outcome: str, reason: str = "") -> None:
        """Append one JSONL audit event."""
        event = {
            "timestamp": datetime.now(UTC).isoformat(),
            "objective": objective.get_hash(),
            "label": objective.get_label(),
            "outcome": outcome,
            "reason": reason,
        }
        with self.log_path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(event, ensure_ascii=True) + "\n")
        self.logger.info(json.dumps(event, ensure_ascii=True))
