"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from typing import Any

import typer

from core.event_emitter import EventEmitter
from core.monitors import ConnectivityMonitor, VisibilityMonitor, build_monitors
from core.settings import MonitorSettings, load_settings

_TRUE_WORDS = {"on", "true", "1", "yes", "online", "visible"}
_FALSE_WORDS = {"off", "false", "0", "no", "offline", "hidden"}


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def configure_logging(level: str | None = None) -> MonitorSettings:
    """Load settings and configure the root logger."""
    settings = load_settings()
    resolved = (level or settings.log_level).upper()
    if resolved not in _LOG_LEVELS:
        raise typer.BadParameter(
            f"Unknown log level '{level or settings.log_level}'. Choose from: {', '.join(_LOG_LEVELS)}",
            param_hint="--log-level",
        )
    logging.basicConfig(
        level=resolved,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return settings


def parse_state(raw: str) -> bool:
    """Translate a CLI state word into a boolean."""
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise typer.BadParameter(f"Unrecognized state '{raw}'.")


def _apply_state(monitor: EventEmitter, state: bool) -> None:
    if isinstance(monitor, ConnectivityMonitor):
        monitor.set_online(state)
    elif isinstance(monitor, VisibilityMonitor):
        monitor.set_visible(state)


def events_list() -> None:
    """Print each monitor and the events it declares."""
    for name, monitor in sorted(build_monitors(load_settings()).items()):
        typer.echo(f"{name}: {', '.join(monitor.allowed_events)}")


def watch(monitor_name: str, states: list[str]) -> None:
    """Subscribe an echo listener and replay a series of state changes."""
    monitors = build_monitors(load_settings())
    monitor = monitors.get(monitor_name)
    if monitor is None:
        typer.echo(
            f"Unknown monitor '{monitor_name}'. Choose from: {', '.join(sorted(monitors))}",
            err=True,
        )
        raise typer.Exit(code=1)

    parsed = [parse_state(raw) for raw in states]
    event_type = monitor.allowed_events[0]

    def echo(*args: Any) -> None:
        typer.echo(f"{event_type}: {', '.join(str(arg) for arg in args)}")

    monitor.on(event_type, echo)
    for state in parsed:
        _apply_state(monitor, state)
    monitor.off(event_type, echo)


def config_show() -> None:
    """Show effective configuration."""
    typer.echo(json.dumps(load_settings().model_dump(), indent=2))
