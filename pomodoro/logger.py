import logging
import os
from pathlib import Path
from typing import Optional

from .config import get_config_dir

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "pomodoro:file"


def debug_enabled() -> bool:
    return os.environ.get("POMODORO_DEBUG") == "1"


def get_log_path() -> Path:
    return get_config_dir() / "pomodoro.log"


def configure_logging(debug: bool = False, log_path: Optional[Path] = None) -> logging.Logger:
    """Send the package's records to a log file.

    The terminal belongs to curses while the timer runs, so there is no
    console handler. Calling this twice does not add a second handler.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logger = logging.getLogger("pomodoro")
    logger.propagate = False
    logger.setLevel(level)

    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            handler.setLevel(level)
            return logger

    log_path = log_path or get_log_path()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(filename=log_path, encoding="utf-8", delay=True)
    except OSError:
        handler = logging.NullHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    handler.set_name(HANDLER_NAME)
    logger.addHandler(handler)
    return logger
