"""
Logger - named channel fanning events out to appenders
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml

from pattern_logger.appenders.base_appender import LogAppender
from pattern_logger.core.log_event import LogEvent, LogEventWrap
from pattern_logger.core.log_level import LogLevel
from pattern_logger.formatters.base_formatter import BaseFormatter
from pattern_logger.formatters.pattern_formatter import DEFAULT_PATTERN, PatternFormatter


class Logger:
    """
    Named logger with a level, a default formatter and appenders.

    Events at or above the logger's level are handed to every attached
    appender, which applies its own level and formatter. A logger with
    no appenders of its own forwards accepted events to its root logger.

    Thread Safety:
        The appender list, level and default formatter are guarded by
        the logger lock. Dispatch and formatter propagation work on a
        snapshot of the appender list taken under the lock, so no
        appender is called while the lock is held.

    Example:
        logger = Logger("app")
        logger.add_appender(ConsoleAppender())
        logger.info("started on port %d", 8080)
    """

    def __init__(
        self,
        name: str = "root",
        level: LogLevel = LogLevel.DEBUG,
        formatter: Optional[BaseFormatter] = None,
        root: Optional["Logger"] = None,
    ):
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Minimum level to dispatch
            formatter: Default formatter (default: DEFAULT_PATTERN)
            root: Logger to forward to while this one has no appenders
        """
        self._name = name
        self._level = level
        self._formatter: BaseFormatter = formatter or PatternFormatter(DEFAULT_PATTERN)
        self._appenders: List[LogAppender] = []
        self._root = root
        self._lock = threading.Lock()
        self._push_lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def root(self) -> Optional["Logger"]:
        return self._root

    @property
    def level(self) -> LogLevel:
        return self._level

    @level.setter
    def level(self, value: LogLevel) -> None:
        with self._lock:
            self._level = value

    def is_enabled(self, level: LogLevel) -> bool:
        """Check whether a statement at ``level`` would be dispatched."""
        return level >= self._level

    def log(self, level: LogLevel, event: LogEvent) -> None:
        """
        Dispatch an event to the attached appenders.

        Args:
            level: Level to log the event at
            event: The log event
        """
        if level < self._level:
            return

        with self._lock:
            appenders = tuple(self._appenders)

        if not appenders:
            if self._root is not None and self._root is not self:
                self._root.log(level, event)
            return

        for appender in appenders:
            try:
                appender.log(self, level, event)
            except Exception as e:
                print(f"Appender error: {e}", file=sys.stderr)

    def _emit(self, level: LogLevel, message: Any, args: Tuple[Any, ...]) -> None:
        if isinstance(message, LogEvent):
            self.log(level, message)
            return
        if level < self._level:
            return

        # depth 3: _emit -> debug()/info()/... -> calling code
        with LogEventWrap(LogEvent.capture(self, level, depth=3)) as wrap:
            if args:
                wrap.format(str(message), *args)
            else:
                wrap.write(message)

    def debug(self, message: Any, *args: Any) -> None:
        """Log debug message (a LogEvent, or text with optional printf args)."""
        self._emit(LogLevel.DEBUG, message, args)

    def info(self, message: Any, *args: Any) -> None:
        """Log info message."""
        self._emit(LogLevel.INFO, message, args)

    def warn(self, message: Any, *args: Any) -> None:
        """Log warning message."""
        self._emit(LogLevel.WARN, message, args)

    def error(self, message: Any, *args: Any) -> None:
        """Log error message."""
        self._emit(LogLevel.ERROR, message, args)

    def fatal(self, message: Any, *args: Any) -> None:
        """Log fatal message."""
        self._emit(LogLevel.FATAL, message, args)

    def add_appender(self, appender: LogAppender) -> None:
        """
        Attach an appender.

        An appender without an explicit formatter starts using this
        logger's formatter.
        """
        with self._lock:
            formatter = self._formatter
            self._appenders.append(appender)
        appender.inherit_formatter(formatter)

    def del_appender(self, appender: LogAppender) -> None:
        """Detach the first matching appender. Does nothing if absent."""
        with self._lock:
            for index, attached in enumerate(self._appenders):
                if attached == appender:
                    del self._appenders[index]
                    break

    def clear_appenders(self) -> None:
        """Detach all appenders."""
        with self._lock:
            self._appenders.clear()

    def get_appenders(self) -> Tuple[LogAppender, ...]:
        """Snapshot of the attached appenders."""
        with self._lock:
            return tuple(self._appenders)

    def set_formatter(self, formatter: Union[BaseFormatter, str, None]) -> bool:
        """
        Replace the default formatter.

        Appenders without an explicit formatter switch to the new one
        immediately.

        Args:
            formatter: Formatter instance, or pattern text to compile

        Returns:
            False if the pattern text is invalid (nothing is changed)
        """
        if isinstance(formatter, str):
            compiled = PatternFormatter(formatter)
            if compiled.is_error:
                print(
                    f"Logger set_formatter name={self._name} value={formatter!r} invalid formatter",
                    file=sys.stderr,
                )
                return False
            formatter = compiled
        if formatter is None:
            return False

        # Pushes are serialized so appenders end on the last formatter set;
        # they run outside the logger lock so dispatch is never held up.
        with self._push_lock:
            with self._lock:
                self._formatter = formatter
                appenders = tuple(self._appenders)
            for appender in appenders:
                appender.inherit_formatter(formatter)
        return True

    def get_formatter(self) -> BaseFormatter:
        with self._lock:
            return self._formatter

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert logger configuration to a dictionary.

        Returns:
            Dictionary with name, level, formatter pattern and appenders
        """
        with self._lock:
            level = self._level
            formatter = self._formatter
            appenders = tuple(self._appenders)

        data: Dict[str, Any] = {
            "name": self._name,
            "level": LogLevel.to_string(level),
            "pattern": getattr(formatter, "pattern", repr(formatter)),
        }
        if appenders:
            data["appenders"] = [appender.to_dict() for appender in appenders]
        return data

    def to_yaml_string(self) -> str:
        """Configuration of this logger as YAML text."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name={self._name!r}, level={LogLevel.to_string(self._level)})"
