"""
Log sink - prints tagged lines, filtered by the configured LogStyle.
"""

import sys
from enum import Enum
from typing import Callable, Optional

from .config import LogStyle


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


Writer = Callable[[str, LogLevel], None]

_PREFIXES = {
    LogLevel.WARNING: "[Sticky] WARN: ",
    LogLevel.ERROR: "[Sticky] ERROR: ",
}


def _print_writer(line: str, level: LogLevel) -> None:
    stream = sys.stderr if level in (LogLevel.WARNING, LogLevel.ERROR) else sys.stdout
    print(line, file=stream)


class StickyLogger:
    """
    Level-filtered log sink.

    NONE prints nothing, ERROR prints warnings and errors, VERBOSE prints all.
    """

    def __init__(self, style: LogStyle = LogStyle.ERROR, writer: Optional[Writer] = None):
        self.style = style
        self._writer = writer or _print_writer

    def enabled_for(self, level: LogLevel) -> bool:
        if self.style == LogStyle.NONE:
            return False
        if self.style == LogStyle.ERROR:
            return level in (LogLevel.WARNING, LogLevel.ERROR)
        return True

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        if not self.enabled_for(level):
            return
        self._writer(_PREFIXES.get(level, "[Sticky] ") + message, level)

    def debug(self, message: str) -> None:
        self.log(message, LogLevel.DEBUG)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING)

    def error(self, message: str) -> None:
        self.log(message, LogLevel.ERROR)
