"""Depth-first runner that achieves an objective and all of its preconditions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from executor.audit_logger import AuditLogger
from objectives.base_objective import Objective
from objectives.environment import Environment
from objectives.errors import UnachievableError
from storage.achievement_ledger import AchievementLedger

logger = logging.getLogger("dbu.runner")


@dataclass
class RunReport:
    """Outcome of one runner invocation."""

    environment: Environment
    achieved: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class ObjectiveRunner:
    """Achieves objectives in dependency order, each hash at most once.

    Notable objectives found in the ledger count as achieved and are not run
    again. Errors raised by `achieve` are audited and re-raised unchanged.
    """

    def __init__(
        self,
        ledger: AchievementLedger | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self.ledger = ledger
        self.audit_logger = audit_logger

    def run(self, objective: Objective, environment: Environment) -> Environment:
        return self.run_with_report(objective, environment).environment

    def run_with_report(self, objective: Objective, environment: Environment) -> RunReport:
        report = RunReport(environment=environment)
        recorded = self.ledger.achieved_hashes() if self.ledger else set()
        achieved: set[str] = set()
        expanded: set[str] = set()
        stack: list[Objective] = [objective]

        while stack:
            current = stack[-1]
            key = current.get_hash()
            if key in achieved:
                stack.pop()
                continue
            if current.is_notable() and key in recorded:
                achieved.add(key)
                report.skipped.append(current.get_label())
                logger.debug("Already achieved: %s", current.get_label())
                if self.audit_logger:
                    self.audit_logger.log(current, outcome="skipped")
                stack.pop()
                continue

            pending = [
                pre
                for pre in current.get_preconditions(report.environment)
                if pre.get_hash() not in achieved
            ]
            if pending:
                if key in expanded:
                    raise UnachievableError(
                        f"Preconditions of '{current.get_label()}' could not be achieved."
                    )
                expanded.add(key)
                for pre in reversed(pending):
                    if pre.get_hash() in expanded:
                        raise UnachievableError(
                            f"Cyclic precondition: '{pre.get_label()}' is required by "
                            f"'{current.get_label()}' and depends on it."
                        )
                    stack.append(pre)
                continue

            report.environment = self._achieve(current, report.environment)
            achieved.add(key)
            if current.is_notable():
                report.achieved.append(current.get_label())
            stack.pop()

        return report

    def _achieve(self, objective: Objective, environment: Environment) -> Environment:
        notable = objective.is_notable()
        if notable:
            logger.info("Achieving: %s", objective.get_label())
        try:
            environment = objective.achieve(environment)
        except Exception as exc:
            if self.audit_logger:
                self.audit_logger.log(objective, outcome="failed", reason=str(exc))
            raise
        if notable:
            if self.ledger:
                self.ledger.mark_achieved(objective.get_hash(), objective.get_label())
            if self.audit_logger:
                self.audit_logger.log(objective, outcome="achieved")
        return environment
