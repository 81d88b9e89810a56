import json
import logging
import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .timer import DEFAULT_DURATION_SECONDS, DEFAULT_MAX_WIDTH, DEFAULT_PADDING

log = logging.getLogger(__name__)

DEFAULT_PADDING_MIDDLE = 40


@dataclass
class Settings:
    duration_seconds: int = DEFAULT_DURATION_SECONDS
    padding: int = DEFAULT_PADDING
    padding_middle: int = DEFAULT_PADDING_MIDDLE
    max_width: int = DEFAULT_MAX_WIDTH


def get_config_dir() -> Path:
    system = platform.system().lower()
    if system == "darwin":
        base = Path.home() / "Library" / "Application Support"
    elif system == "windows":
        appdata = os.environ.get("APPDATA")
        if appdata:
            base = Path(appdata)
        else:
            base = Path.home() / "AppData" / "Roaming"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "pomodoro"


def get_config_path() -> Path:
    return get_config_dir() / "config.json"


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or get_config_path()
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        log.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    log.warning("ignoring config %s: top level is not an object", path)
    return {}


def _get_int(config: Dict[str, Any], key: str, default: int, minimum: int) -> int:
    value = config.get(key)
    if value is None:
        return default
    # bool is an int subclass; reject it explicitly.
    if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
        log.warning("invalid %s=%r in config, using %d", key, value, default)
        return default
    return value


def get_duration_seconds(config: Dict[str, Any]) -> int:
    return _get_int(config, "duration_seconds", DEFAULT_DURATION_SECONDS, 1)


def get_padding(config: Dict[str, Any]) -> int:
    return _get_int(config, "padding", DEFAULT_PADDING, 0)


def get_max_width(config: Dict[str, Any]) -> int:
    return _get_int(config, "max_width", DEFAULT_MAX_WIDTH, 1)


def load_settings(config: Dict[str, Any], duration_seconds: Optional[int] = None) -> Settings:
    return Settings(
        duration_seconds=duration_seconds or get_duration_seconds(config),
        padding=get_padding(config),
        max_width=get_max_width(config),
    )
