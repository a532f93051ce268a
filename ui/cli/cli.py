"""CLI entrypoint for state-emitter."""

from __future__ import annotations

from typing import Optional

import typer

from ui.cli import commands

app = typer.Typer(help="Synchronous state monitors built on EventEmitter")
config_app = typer.Typer(help="Configuration commands")


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override configured log level"),
) -> None:
    """Configure logging before any command runs."""
    commands.configure_logging(log_level)


@app.command("events")
def events_cmd() -> None:
    """List monitors and their event names."""
    commands.events_list()


@app.command("watch")
def watch_cmd(
    monitor: str = typer.Argument(..., help="Monitor name: connectivity or visibility"),
    states: Optional[list[str]] = typer.Argument(None, help="States to apply in order (on/off)"),
) -> None:
    """Print the initial state and every change for a monitor."""
    commands.watch(monitor_name=monitor, states=states or [])


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    commands.config_show()


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
