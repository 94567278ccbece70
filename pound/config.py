"""User configuration and logging setup.

Configuration is read from ``config.json`` in the user's config directory.
The file is optional and never written. Invalid values are logged and
replaced by defaults; a broken config never stops the viewer.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import ViewerConstants

logger = logging.getLogger(__name__)

APP_NAME = "pound"
LOG_LEVEL_ENV = "POUND_LOG_LEVEL"


@dataclass(frozen=True)
class ViewerConfig:
    """Settings sampled once at startup."""
    tab_stop: int = ViewerConstants.TAB_STOP
    poll_timeout: float = ViewerConstants.POLL_TIMEOUT
    log_level: str = ViewerConstants.DEFAULT_LOG_LEVEL


def config_path() -> Path:
    return Path(platformdirs.user_config_dir(APP_NAME)) / "config.json"


def log_path() -> Path:
    return Path(platformdirs.user_log_dir(APP_NAME)) / "pound.log"


def _read_json(path: Path) -> Dict[str, Any]:
    """Load the config file, returning {} if it is missing or unusable."""
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not load config from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file has invalid format (not a dict), ignoring")
        return {}
    return data


def _valid_level(name: Any) -> Optional[str]:
    if isinstance(name, str) and isinstance(logging.getLevelName(name.upper()), int):
        return name.upper()
    return None


def parse_config(data: Dict[str, Any]) -> ViewerConfig:
    """Build a ViewerConfig from raw settings, dropping invalid entries."""
    defaults = ViewerConfig()
    values: Dict[str, Any] = {}

    tab_stop = data.get("tab_stop")
    if tab_stop is not None:
        if (isinstance(tab_stop, int) and not isinstance(tab_stop, bool)
                and ViewerConstants.MIN_TAB_STOP <= tab_stop <= ViewerConstants.MAX_TAB_STOP):
            values["tab_stop"] = tab_stop
        else:
            logger.warning(f"Invalid tab_stop {tab_stop!r}, using {defaults.tab_stop}")

    poll_timeout = data.get("poll_timeout")
    if poll_timeout is not None:
        if (isinstance(poll_timeout, (int, float)) and not isinstance(poll_timeout, bool)
                and ViewerConstants.MIN_POLL_TIMEOUT <= poll_timeout <= ViewerConstants.MAX_POLL_TIMEOUT):
            values["poll_timeout"] = float(poll_timeout)
        else:
            logger.warning(f"Invalid poll_timeout {poll_timeout!r}, using {defaults.poll_timeout}")

    log_level = data.get("log_level")
    if log_level is not None:
        level = _valid_level(log_level)
        if level:
            values["log_level"] = level
        else:
            logger.warning(f"Invalid log_level {log_level!r}, using {defaults.log_level}")

    return ViewerConfig(**values)


def load_config(path: Optional[Path] = None) -> ViewerConfig:
    """Load the user's config, falling back to defaults."""
    return parse_config(_read_json(path or config_path()))


def configure_logging(config: ViewerConfig, path: Optional[Path] = None) -> None:
    """Send log records to a file; the terminal belongs to the viewer.

    The level comes from the config unless ``POUND_LOG_LEVEL`` is set. The
    log file is only created once something is actually logged.
    """
    level = _valid_level(os.environ.get(LOG_LEVEL_ENV)) or config.log_level
    path = path or log_path()
    root = logging.getLogger(APP_NAME)
    root.setLevel(level)
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        root.addHandler(logging.NullHandler())
        logger.warning(f"Could not create log directory {path.parent}: {e}")
        return
    handler = logging.FileHandler(path, encoding='utf-8', delay=True)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
