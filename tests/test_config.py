from __future__ import annotations

import json
from pathlib import Path

import pytest

from solardash import config as config_module
from solardash.config import DEFAULT_CONFIG, find_config, load_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "SOLARDASH_CONFIG_PATH", tmp_path / "user" / "solardash.json")


def test_defaults_when_no_file_exists():
    assert find_config() is None
    assert load_config() == DEFAULT_CONFIG


def test_file_in_working_directory_is_merged(tmp_path: Path):
    (tmp_path / "solardash.json").write_text(
        json.dumps({"base_url": "http://example.test", "port": 9000, "unrelated": True}),
        encoding="utf-8",
    )

    config = load_config()

    assert config["base_url"] == "http://example.test"
    assert config["port"] == 9000
    assert "unrelated" not in config
    assert config["consumption_start"] == 1692316800


def test_user_config_dir_is_used_as_fallback(tmp_path: Path):
    user_config = tmp_path / "user" / "solardash.json"
    user_config.parent.mkdir()
    user_config.write_text(json.dumps({"consumption_variant": "minimal"}), encoding="utf-8")

    assert find_config() == user_config
    assert load_config()["consumption_variant"] == "minimal"


def test_overrides_win_and_none_is_ignored(tmp_path: Path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"host": "0.0.0.0", "port": 9000}), encoding="utf-8")

    config = load_config(path, {"port": 8123, "host": None})

    assert config["port"] == 8123
    assert config["host"] == "0.0.0.0"


def test_explicit_missing_path_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.json")


def test_unknown_variant_raises():
    with pytest.raises(ValueError, match="consumption_variant"):
        load_config(overrides={"consumption_variant": "stacked"})
