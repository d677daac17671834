"""CLI entrypoint for notifybridge."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Notification capture-and-forwarding bridge")
config_app = typer.Typer(help="Configuration commands")


@app.command("replay")
def replay_cmd(
    events_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON-lines file of raw events"),
    detach_after: int | None = typer.Option(
        None, "--detach-after", min=0, help="Detach the subscriber after N events"
    ),
    root: Path | None = typer.Option(None, "--root", help="Directory holding config/"),
) -> None:
    """Feed recorded notifications through the bridge to a stdout subscriber."""
    commands.replay(events_file=events_file, detach_after=detach_after, root=root)


@config_app.command("show")
def config_show_cmd(
    root: Path | None = typer.Option(None, "--root", help="Directory holding config/"),
) -> None:
    """Show effective configuration."""
    commands.config_show(root=root)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
