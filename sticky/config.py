"""
Configuration for the sticky store.

Values come from the environment (a .env file is honoured) or from a
YAML file. Everything else receives a StickyConfiguration instead of
reading os.environ directly.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import yaml
from dotenv import load_dotenv

from .errors import ConfigError

DEFAULT_DATA_DIR = Path("sticky_data")
FILE_EXTENSION = ".json"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class LogStyle(str, Enum):
    """How much the store logs."""
    NONE = "none"
    ERROR = "error"      # Errors only
    VERBOSE = "verbose"  # Everything, including data dumps


@dataclass
class StickyConfiguration:
    """
    Runtime settings for a StickyStore.

    data_dir:   Directory holding one JSON file per record type
    log_style:  Log filtering (none / error / verbose)
    async_dump: Run dump_to_log on a background thread
    """
    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    log_style: LogStyle = LogStyle.ERROR
    async_dump: bool = False

    def __post_init__(self):
        self.data_dir = Path(self.data_dir).expanduser()
        self.log_style = parse_log_style(self.log_style)

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "StickyConfiguration":
        """Build from STICKY_* environment variables (after loading .env)."""
        load_dotenv(env_file)
        return cls(
            data_dir=Path(os.getenv("STICKY_DATA_DIR", str(DEFAULT_DATA_DIR))),
            log_style=parse_log_style(os.getenv("STICKY_LOG_STYLE", LogStyle.ERROR.value)),
            async_dump=parse_bool(os.getenv("STICKY_ASYNC", "false"), "STICKY_ASYNC"),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "StickyConfiguration":
        """Build from a YAML mapping. A missing file yields defaults."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

        return cls(
            data_dir=Path(data.get("data_dir", DEFAULT_DATA_DIR)),
            log_style=parse_log_style(data.get("log_style", LogStyle.ERROR.value)),
            async_dump=parse_bool(data.get("async_dump", False), "async_dump"),
        )


def parse_log_style(value: Union[str, LogStyle]) -> LogStyle:
    if isinstance(value, LogStyle):
        return value
    try:
        return LogStyle(str(value).strip().lower())
    except ValueError as e:
        choices = ", ".join(s.value for s in LogStyle)
        raise ConfigError(f"Invalid log style '{value}': expected one of {choices}") from e


def parse_bool(value: Union[str, bool], name: str) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid {name} value '{value}': expected true or false")
