"""Connectivity and visibility monitor tests."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from core.event_emitter import UnknownEventType
from core.monitors import ConnectivityMonitor, VisibilityMonitor, build_monitors
from core.settings import MonitorSettings


def test_connectivity_replays_current_state_on_subscribe() -> None:
    monitor = ConnectivityMonitor(online=False)
    listener = MagicMock()

    monitor.on("online", listener)

    listener.assert_called_once_with(False)


def test_connectivity_triggers_only_on_change() -> None:
    monitor = ConnectivityMonitor(online=True)
    listener = MagicMock()
    monitor.on("online", listener)
    listener.reset_mock()

    monitor.go_online()
    listener.assert_not_called()

    monitor.go_offline()
    monitor.go_offline()
    monitor.go_online()

    assert [call.args for call in listener.call_args_list] == [(False,), (True,)]
    assert monitor.is_online is True


def test_connectivity_rejects_undeclared_events() -> None:
    monitor = ConnectivityMonitor()
    with pytest.raises(UnknownEventType):
        monitor.on("visible", MagicMock())


def test_connectivity_logs_transitions(caplog: pytest.LogCaptureFixture) -> None:
    monitor = ConnectivityMonitor(online=True)
    with caplog.at_level(logging.INFO, logger="emitter.monitors"):
        monitor.set_online(False)
    assert "Connectivity changed: offline" in caplog.text


def test_visibility_replays_and_reports_changes() -> None:
    monitor = VisibilityMonitor(visible=True)
    listener = MagicMock()

    monitor.on("visible", listener)
    monitor.set_visible(False)
    monitor.off("visible", listener)
    monitor.set_visible(True)

    assert [call.args for call in listener.call_args_list] == [(True,), (False,)]
    assert monitor.listener_count("visible") == 0


def test_visibility_has_no_replay_for_other_events() -> None:
    monitor = VisibilityMonitor()
    assert monitor.get_initial_event("online") is None


def test_build_monitors_uses_settings() -> None:
    monitors = build_monitors(MonitorSettings(initially_online=False, initially_visible=True))

    assert set(monitors) == {"connectivity", "visibility"}
    assert monitors["connectivity"].is_online is False  # type: ignore[attr-defined]
    assert monitors["visibility"].is_visible is True  # type: ignore[attr-defined]
