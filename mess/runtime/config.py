"""Persistent JSON config helpers.

Stores the UI theme, page size, and side-by-side rendered-pane width.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .scroll import DEFAULT_PAGE_LINES
from .session import SIDE_BY_SIDE_RENDERED_WIDTH

logger = logging.getLogger(__name__)

APP_NAME = "mess"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "MESS_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def _config_path() -> Path:
    """Return the config file in use; ``MESS_CONFIG`` overrides the platform default."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = _config_path()
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Could not load config from %s: %s", config_path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a JSON object, ignoring", config_path)
        return {}
    return data


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored so a
    read-only config location never breaks the pager.
    """
    config_path = _config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("Could not save config to %s: %s", config_path, exc)


def _coerce_positive_int(value: object, default: int) -> int:
    """Booleans, non-integers, and values below 1 fall back to ``default``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value if value >= 1 else default


@dataclass(frozen=True)
class PagerSettings:
    theme: str | None = None
    page_lines: int = DEFAULT_PAGE_LINES
    side_by_side_width: int = SIDE_BY_SIDE_RENDERED_WIDTH


def load_settings() -> PagerSettings:
    """Read pager settings from config, normalizing every field."""
    data = load_config()
    theme = data.get("theme")
    return PagerSettings(
        theme=theme.strip() if isinstance(theme, str) and theme.strip() else None,
        page_lines=_coerce_positive_int(data.get("page_lines"), DEFAULT_PAGE_LINES),
        side_by_side_width=_coerce_positive_int(
            data.get("side_by_side_width"),
            SIDE_BY_SIDE_RENDERED_WIDTH,
        ),
    )


def save_theme(theme: str) -> None:
    """Persist the preferred UI theme name."""
    config = load_config()
    config["theme"] = theme
    save_config(config)
