"""
Log level enumeration

Ordered severity values with lenient text conversion.
"""

from enum import IntEnum
from typing import Any, Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values increase with severity. UNKNOWN is the lowest value and
    the result of converting any unrecognized text.
    """

    UNKNOWN = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @staticmethod
    def to_string(level: Any) -> str:
        """
        Convert a level to its canonical name.

        Args:
            level: LogLevel member or plain integer

        Returns:
            Upper-case level name, "UNKNOWN" for values outside the enum
        """
        try:
            return LEVEL_NAMES.get(LogLevel(level), "UNKNOWN")
        except (ValueError, TypeError):
            return "UNKNOWN"

    @classmethod
    def from_string(cls, level_str: Any) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            Matching LogLevel, or LogLevel.UNKNOWN if nothing matches
        """
        if not isinstance(level_str, str):
            return cls.UNKNOWN
        return LEVEL_FROM_NAME.get(level_str.strip().upper(), cls.UNKNOWN)


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.UNKNOWN: "UNKNOWN",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}
