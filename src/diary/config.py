"""Configuration management for the diary."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.validation import BODY_MAX_LENGTH, TITLE_MAX_LENGTH

logger = logging.getLogger(__name__)

DIARY_HOME = Path(os.environ.get("DIARY_HOME", Path.home() / "diary"))
CONFIG_FILE = DIARY_HOME / "config" / "diary.conf"
DATA_DIR = DIARY_HOME / "data"
DEFAULT_DATA_FILE = DATA_DIR / "diary.tsv"


@dataclass
class Config:
    """Diary configuration."""

    data_file: str = ""
    title_max_length: int = TITLE_MAX_LENGTH
    body_max_length: int = BODY_MAX_LENGTH

    def data_path(self) -> Path:
        """Resolve the diary file location."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DEFAULT_DATA_FILE


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, using {default}")
        return default
    if parsed < 1:
        logger.warning(f"{key.upper()} must be positive, using {default}")
        return default
    return parsed


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from diary.conf file."""
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
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "data_file":
                config.data_file = value
            case "title_max_length":
                config.title_max_length = _parse_int(key, value, TITLE_MAX_LENGTH)
            case "body_max_length":
                config.body_max_length = _parse_int(key, value, BODY_MAX_LENGTH)
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config
