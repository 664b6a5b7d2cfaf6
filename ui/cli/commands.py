"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from db_update.status import collect_status
from objectives.errors import ConfigurationError, UnachievableError


def _runtime(root: Path | None = None) -> RuntimeBundle:
    try:
        bundle = Orchestrator(root=root).build()
    except (ConfigurationError, ValueError) as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    level = str(bundle.config.get("logging", {}).get("level", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return bundle


def update(root: Path | None = None) -> None:
    """Run every pending update step."""
    bundle = _runtime(root)
    try:
        report = bundle.runner.run_with_report(bundle.update_objective(), bundle.environment)
    except (ConfigurationError, UnachievableError) as exc:
        typer.echo(f"Update failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    for label in report.achieved:
        typer.echo(f"achieved: {label}")
    typer.echo(f"Achieved: {len(report.achieved)} | Already done: {len(report.skipped)}")


def status(root: Path | None = None, pending: bool = False) -> None:
    """Print step status rows as JSON."""
    bundle = _runtime(root)
    try:
        rows = collect_status(bundle.providers, bundle.ledger.achieved_hashes())
    except ConfigurationError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    if pending:
        rows = [row for row in rows if not row.achieved]
    typer.echo(json.dumps([row.model_dump() for row in rows], indent=2))


def config_show(root: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(root)
    typer.echo(json.dumps(bundle.config, indent=2, default=str))
