"""Configuration management for cadence."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CADENCE_HOME = Path(os.environ.get("CADENCE_HOME", Path.home() / "cadence"))
CONFIG_FILE = CADENCE_HOME / "config" / "cadence.conf"
DATA_DIR = CADENCE_HOME / "data"
HABITS_FILE = DATA_DIR / "habits.json"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """cadence configuration."""

    preceding_days: int = 21
    following_days: int = 7
    graph_column: int = 40
    completed_glyph: str = "*"
    today_glyph: str = "!"
    show_done_always_green: bool = False
    show_habits_only_for_today: bool = True
    habits_file: str = ""

    @property
    def habits_path(self) -> Path:
        if self.habits_file:
            return Path(self.habits_file).expanduser()
        return HABITS_FILE


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, using {default}")
        return default
    if parsed < 0:
        logger.warning(f"{key.upper()} must not be negative, using {default}")
        return default
    return parsed


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}, using {default}")
    return default


def _parse_glyph(key: str, value: str, default: str) -> str:
    if len(value) != 1:
        logger.warning(f"{key.upper()} must be a single character, using {default!r}")
        return default
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from cadence.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "preceding_days":
                config.preceding_days = _parse_int(key, value, config.preceding_days)
            case "following_days":
                config.following_days = _parse_int(key, value, config.following_days)
            case "graph_column":
                config.graph_column = _parse_int(key, value, config.graph_column)
            case "completed_glyph":
                config.completed_glyph = _parse_glyph(key, value, config.completed_glyph)
            case "today_glyph":
                config.today_glyph = _parse_glyph(key, value, config.today_glyph)
            case "show_done_always_green":
                config.show_done_always_green = _parse_bool(key, value, config.show_done_always_green)
            case "show_habits_only_for_today":
                config.show_habits_only_for_today = _parse_bool(key, value, config.show_habits_only_for_today)
            case "habits_file":
                config.habits_file = value
            case _:
                logger.debug(f"Ignoring unknown config key {key.upper()}")

    return config
