import json
from pathlib import Path

import pytest

from pomodoro import config
from pomodoro.config import Settings, load_config, load_settings


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_is_empty(tmp_path) -> None:
    assert load_config(tmp_path / "nope.json") == {}


def test_invalid_json_is_empty(tmp_path) -> None:
    assert load_config(_write(tmp_path / "c.json", "{not json")) == {}


def test_non_object_is_empty(tmp_path) -> None:
    assert load_config(_write(tmp_path / "c.json", "[1, 2]")) == {}


def test_reads_values(tmp_path) -> None:
    path = _write(tmp_path / "c.json", json.dumps({"duration_seconds": 120, "padding": 2, "max_width": 60}))

    settings = load_settings(load_config(path))

    assert settings == Settings(duration_seconds=120, padding=2, max_width=60)


@pytest.mark.parametrize(
    "raw",
    [
        {"duration_seconds": 0},
        {"duration_seconds": -5},
        {"duration_seconds": "25"},
        {"duration_seconds": True},
        {"padding": -1, "max_width": 0},
    ],
)
def test_invalid_values_fall_back(raw) -> None:
    assert load_settings(raw) == Settings()


def test_duration_override_wins() -> None:
    assert load_settings({"duration_seconds": 120}, duration_seconds=30).duration_seconds == 30


def test_config_path_uses_xdg(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config.platform, "system", lambda: "Linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert config.get_config_path() == tmp_path / "pomodoro" / "config.json"
