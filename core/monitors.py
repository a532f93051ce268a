"""Concrete emitters that report environment state to subscribers."""

from __future__ import annotations

import logging
from typing import Any

from core.event_emitter import EventEmitter
from core.settings import MonitorSettings

logger = logging.getLogger("emitter.monitors")


class ConnectivityMonitor(EventEmitter):
    """Emits ``online`` with the new connectivity state whenever it changes."""

    def __init__(self, online: bool = True) -> None:
        super().__init__(["online"])
        self._online = bool(online)

    @property
    def is_online(self) -> bool:
        return self._online

    def get_initial_event(self, event_type: str) -> list[Any] | None:
        if event_type == "online":
            return [self._online]
        return None

    def set_online(self, online: bool) -> None:
        online = bool(online)
        if online == self._online:
            return
        self._online = online
        logger.info("Connectivity changed: %s", "online" if online else "offline")
        self.trigger("online", online)

    def go_online(self) -> None:
        self.set_online(True)

    def go_offline(self) -> None:
        self.set_online(False)


class VisibilityMonitor(EventEmitter):
    """Emits ``visible`` when the foreground visibility state flips."""

    def __init__(self, visible: bool = True) -> None:
        super().__init__(["visible"])
        self._visible = bool(visible)

    @property
    def is_visible(self) -> bool:
        return self._visible

    def get_initial_event(self, event_type: str) -> list[Any] | None:
        if event_type == "visible":
            return [self._visible]
        return None

    def set_visible(self, visible: bool) -> None:
        visible = bool(visible)
        if visible == self._visible:
            return
        self._visible = visible
        logger.info("Visibility changed: %s", "visible" if visible else "hidden")
        self.trigger("visible", visible)


def build_monitors(settings: MonitorSettings) -> dict[str, EventEmitter]:
    """Build the default monitors from settings."""
    return {
        "connectivity": ConnectivityMonitor(online=settings.initially_online),
        "visibility": VisibilityMonitor(visible=settings.initially_visible),
    }
