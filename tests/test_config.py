from __future__ import annotations

import json

from radar_core import config


def test_env_helpers_fall_back_on_garbage(monkeypatch):
    monkeypatch.setenv("RADAR_X", "not-a-number")
    assert config._env_int("RADAR_X", 7) == 7
    assert config._env_float("RADAR_X", 1.5) == 1.5
    monkeypatch.setenv("RADAR_X", " 2.75 ")
    assert config._env_float("RADAR_X", 1.5) == 2.75
    monkeypatch.setenv("RADAR_X", "Yes")
    assert config._env_bool("RADAR_X", False) is True
    monkeypatch.delenv("RADAR_X")
    assert config._env_bool("RADAR_X", False) is False


def test_load_config_merges_file_and_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CATALOG_DIR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    (tmp_path / "config.json").write_text(json.dumps({"DEFAULT_LEVEL": "L1", "LOG_LEVEL": "INFO"}), encoding="utf-8")
    monkeypatch.setenv("DEFAULT_LEVEL", "L3")

    cfg = config.load_config()
    assert cfg["DEFAULT_LEVEL"] == "L3"
    assert cfg["LOG_LEVEL"] == "INFO"
    assert "CATALOG_DIR" not in cfg


def test_broken_config_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("CATALOG_DIR", "DEFAULT_LEVEL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    (tmp_path / "config.json").write_text("{broken", encoding="utf-8")
    assert config.load_config() == {}
