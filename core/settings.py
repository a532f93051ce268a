"""Configuration loading for emitter monitors."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel


class MonitorSettings(BaseModel):
    """Startup state and logging for the bundled monitors."""

    initially_online: bool = True
    initially_visible: bool = True
    log_level: str = "WARNING"


def load_yaml(path: Path) -> dict[str, Any]:
    """Read one settings file; a missing file counts as no overrides."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path.name} must contain a mapping, got {type(data).__name__}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Layer ``override`` on ``base``; nested sections merge key by key."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = merge_dicts(current, value)
        merged[key] = value
    return merged


def default_root() -> Path:
    return Path(__file__).resolve().parents[1]


def load_settings(root: Path | None = None) -> MonitorSettings:
    """Load ``config/default.yaml`` with ``config/local.yaml`` overrides."""
    config_dir = (root or default_root()) / "config"
    merged = merge_dicts(
        load_yaml(config_dir / "default.yaml"),
        load_yaml(config_dir / "local.yaml"),
    )
    section = merged.get("monitors") or {}
    if not isinstance(section, dict):
        raise ValueError("'monitors' config section must be a mapping.")
    return MonitorSettings(**section)
