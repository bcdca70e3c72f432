"""
Base appender interface
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

import yaml

from pattern_logger.core.log_level import LogLevel
from pattern_logger.formatters.base_formatter import BaseFormatter

if TYPE_CHECKING:
    from pattern_logger.core.log_event import LogEvent
    from pattern_logger.core.logger import Logger


class LogAppender(ABC):
    """
    Abstract base class for log appenders.

    An appender is a level-gated output sink. Its formatter is either
    set explicitly, or inherited from the logger it is attached to and
    replaced whenever that logger's formatter changes.

    Thread Safety:
        Level, formatter and the explicit-formatter flag are guarded by
        the appender's own lock, independent of any logger lock. The sink
        is guarded by a separate write lock, so a slow write never holds
        up a formatter or level change.
    """

    #: Name used in configuration dumps
    type_name = "LogAppender"

    def __init__(self, level: LogLevel = LogLevel.DEBUG, formatter: Optional[BaseFormatter] = None):
        """
        Initialize appender.

        Args:
            level: Minimum level this appender writes
            formatter: Explicit formatter (default: inherit from logger)
        """
        self._lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._level = level
        self._formatter: Optional[BaseFormatter] = None
        self._has_formatter = False
        if formatter is not None:
            self.set_formatter(formatter)

    @property
    def level(self) -> LogLevel:
        with self._lock:
            return self._level

    @level.setter
    def level(self, value: LogLevel) -> None:
        with self._lock:
            self._level = value

    @property
    def has_formatter(self) -> bool:
        """True if a formatter was set explicitly on this appender."""
        with self._lock:
            return self._has_formatter

    def set_formatter(self, formatter: Optional[BaseFormatter]) -> None:
        """
        Set an explicit formatter.

        Passing None drops the explicit formatter; the appender then
        follows its logger again from the next formatter change.
        """
        with self._lock:
            self._formatter = formatter
            self._has_formatter = formatter is not None

    def get_formatter(self) -> Optional[BaseFormatter]:
        """Formatter currently in effect (explicit or inherited)."""
        with self._lock:
            return self._formatter

    def inherit_formatter(self, formatter: Optional[BaseFormatter]) -> bool:
        """
        Adopt a logger's formatter unless one was set explicitly.

        Returns:
            True if the formatter was adopted
        """
        with self._lock:
            if self._has_formatter:
                return False
            self._formatter = formatter
            return True

    def log(self, logger: "Logger", level: LogLevel, event: "LogEvent") -> None:
        """
        Render and write an event if it clears this appender's level.

        Args:
            logger: Logger dispatching the event
            level: Level the event is logged at
            event: The log event
        """
        with self._lock:
            if level < self._level:
                return
            formatter = self._formatter

        if formatter is None:
            return
        self._write(formatter.format(logger, level, event))

    @abstractmethod
    def _write(self, text: str) -> None:
        """Write one rendered record to the sink."""
        pass

    def flush(self) -> None:
        """Flush buffered output."""
        pass

    def close(self) -> None:
        """Release the sink."""
        self.flush()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert appender configuration to a dictionary.

        The pattern is only included when set explicitly.
        """
        with self._lock:
            data: Dict[str, Any] = {
                "type": self.type_name,
                "level": LogLevel.to_string(self._level),
            }
            if self._has_formatter and self._formatter is not None:
                data["pattern"] = getattr(self._formatter, "pattern", repr(self._formatter))
        return data

    def to_yaml_string(self) -> str:
        """Configuration of this appender as YAML text."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"{type(self).__name__}(level={LogLevel.to_string(self.level)})"
