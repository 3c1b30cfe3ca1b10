from __future__ import annotations

import logging

import storage
from app_state import AppState, Observable


def test_subscribe_receives_current_value() -> None:
    obs = Observable(1)
    seen = []
    obs.subscribe(seen.append)
    assert seen == [1]


def test_set_publishes_changes_only() -> None:
    obs = Observable(1)
    seen = []
    obs.subscribe(seen.append)
    obs.set(2)
    obs.set(2)
    obs.set(3)
    assert seen == [1, 2, 3]
    assert obs.value == 3


def test_unsubscribe() -> None:
    obs = Observable("a")
    seen = []
    unsubscribe = obs.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    obs.set("b")
    assert seen == ["a"]


def test_failing_subscriber_does_not_block_others(caplog) -> None:
    obs = Observable(0)

    def broken(_):
        raise RuntimeError("boom")

    seen = []
    obs.subscribe(broken)
    obs.subscribe(seen.append)
    with caplog.at_level(logging.ERROR):
        obs.set(1)
    assert seen == [0, 1]
    assert "failed" in caplog.text


def test_app_state_fills_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(storage, "CONFIG_PATH", tmp_path / "data" / "config.json")
    state = AppState(config={"theme": "dark"})
    assert state.theme == "dark"
    assert state.log_level == "INFO"
    assert state.config["window_title"] == "Holdtimer"


def test_app_state_load_and_save(tmp_path, monkeypatch) -> None:
    path = tmp_path / "data" / "config.json"
    monkeypatch.setattr(storage, "CONFIG_PATH", path)
    state = AppState.load()
    assert path.exists()
    assert state.theme == "light"

    state.config["theme"] = "dark"
    state.save_config()
    assert AppState.load().theme == "dark"
