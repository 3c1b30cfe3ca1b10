from __future__ import annotations

import json

import pytest

import storage


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "data" / "config.json"
    monkeypatch.setattr(storage, "CONFIG_PATH", path)
    return path


def test_ensure_data_files_creates_defaults(config_path) -> None:
    storage.ensure_data_files()
    assert json.loads(config_path.read_text(encoding="utf-8")) == storage.DEFAULT_CONFIG


def test_ensure_data_files_keeps_existing(config_path) -> None:
    storage.save_config({"theme": "dark"})
    storage.ensure_data_files()
    assert json.loads(config_path.read_text(encoding="utf-8")) == {"theme": "dark"}


def test_missing_file_returns_defaults(config_path) -> None:
    assert storage.load_config() == storage.DEFAULT_CONFIG
    assert not config_path.exists()


def test_partial_config_is_merged(config_path) -> None:
    storage.save_config({"theme": "dark", "extra": 1})
    cfg = storage.load_config()
    assert cfg["theme"] == "dark"
    assert cfg["log_level"] == "INFO"
    assert cfg["extra"] == 1


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_bad_config_is_repaired(config_path, content) -> None:
    config_path.parent.mkdir(parents=True)
    config_path.write_text(content, encoding="utf-8")
    assert storage.load_config() == storage.DEFAULT_CONFIG
    assert json.loads(config_path.read_text(encoding="utf-8")) == storage.DEFAULT_CONFIG
