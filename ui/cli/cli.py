"""CLI entrypoint for database updates."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Consecutive database update steps")
config_app = typer.Typer(help="Configuration commands")

ROOT_OPTION = typer.Option(None, "--root", help="Installation root holding config/")


@app.command("update")
def update_cmd(root: Path | None = ROOT_OPTION) -> None:
    """Run all pending update steps of the configured providers."""
    commands.update(root=root)


@app.command("status")
def status_cmd(
    root: Path | None = ROOT_OPTION,
    pending: bool = typer.Option(False, "--pending", help="Only show steps not yet achieved"),
) -> None:
    """Show the steps of every configured provider."""
    commands.status(root=root, pending=pending)


@config_app.command("show")
def config_show_cmd(root: Path | None = ROOT_OPTION) -> None:
    """Show effective configuration."""
    commands.config_show(root=root)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
