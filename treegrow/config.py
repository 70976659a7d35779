"""Read-only JSON user settings.

Holds the default theme, connector glyphs, animation speed, double-click
window, and tree-pane width. All access is defensive: malformed or missing
config falls back safely, one key at a time. Nothing is ever written back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "treegrow"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_TICK_MS = 10
DEFAULT_DOUBLE_CLICK_MS = 500
DEFAULT_LEFT_PANE_PERCENT = 70.0

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    theme: str | None = None
    glyphs: str = "box"
    tick_ms: int = DEFAULT_TICK_MS
    double_click_ms: int = DEFAULT_DOUBLE_CLICK_MS
    left_pane_percent: float = DEFAULT_LEFT_PANE_PERCENT

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0

    @property
    def double_click_seconds(self) -> float:
        return self.double_click_ms / 1000.0


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_positive_int(value: object, default: int) -> int:
    """Accept strictly positive integers; booleans and other types fall back."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value if value > 0 else default


def _coerce_percent(value: object, default: float) -> float:
    """Accept a percentage in the open interval (0, 100)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value <= 0 or value >= 100:
        return default
    return float(value)


def _coerce_name(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_settings() -> Settings:
    data = load_config()
    glyphs = _coerce_name(data.get("glyphs"))
    return Settings(
        theme=_coerce_name(data.get("theme")),
        glyphs=glyphs if glyphs is not None else "box",
        tick_ms=_coerce_positive_int(data.get("tick_ms"), DEFAULT_TICK_MS),
        double_click_ms=_coerce_positive_int(data.get("double_click_ms"), DEFAULT_DOUBLE_CLICK_MS),
        left_pane_percent=_coerce_percent(data.get("left_pane_percent"), DEFAULT_LEFT_PANE_PERCENT),
    )
