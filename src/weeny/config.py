"""Configuration management for Weeny."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

WEENY_HOME = Path(os.environ.get("WEENY_HOME", Path.home() / "weeny"))
CONFIG_FILE = WEENY_HOME / "config" / "weeny.conf"
DATA_DIR = WEENY_HOME / "data"
DATA_FILE = "TaskList.txt"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Weeny configuration."""

    data_dir: str = str(DATA_DIR)
    data_file: str = DATA_FILE
    autosave: bool = True

    @property
    def data_path(self) -> Path:
        """The one file tasks are loaded from and saved to."""
        return Path(self.data_dir).expanduser() / self.data_file


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    logger.warning(f"Ignoring invalid {key.upper()} value {value!r}, keeping {default}")
    return default


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith(('"', "'")):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from weeny.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "data_file":
                config.data_file = value
            case "autosave":
                config.autosave = _parse_bool(key, value, config.autosave)

    return config
