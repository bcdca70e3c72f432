"""Logger builder pattern"""

from pathlib import Path
from typing import List, Optional, Tuple

from pattern_logger.appenders.base_appender import LogAppender
from pattern_logger.appenders.console_appender import ConsoleAppender
from pattern_logger.appenders.file_appender import FileAppender
from pattern_logger.core.log_level import LogLevel
from pattern_logger.core.logger import Logger
from pattern_logger.formatters.pattern_formatter import DEFAULT_PATTERN, PatternFormatter


def _compile(pattern: Optional[str]) -> Optional[PatternFormatter]:
    if pattern is None:
        return None
    formatter = PatternFormatter(pattern)
    if formatter.is_error:
        raise ValueError(f"invalid pattern: {pattern!r}")
    return formatter


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Example:
        logger = (LoggerBuilder()
            .with_name("app")
            .with_level(LogLevel.INFO)
            .with_pattern("%d [%p] %c: %m%n")
            .with_console()
            .with_file("logs/app.log", level=LogLevel.WARN)
            .build())
    """

    def __init__(self):
        self._name = "root"
        self._level = LogLevel.DEBUG
        self._formatter = PatternFormatter(DEFAULT_PATTERN)
        self._console: Optional[Tuple[LogLevel, Optional[PatternFormatter]]] = None
        self._files: List[Tuple[Path, LogLevel, Optional[PatternFormatter]]] = []
        self._custom_appenders: List[LogAppender] = []
        self._root: Optional[Logger] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._level = level
        return self

    def with_pattern(self, pattern: str) -> "LoggerBuilder":
        """
        Set the logger's default pattern.

        Raises:
            ValueError: If the pattern does not parse cleanly
        """
        self._formatter = _compile(pattern)
        return self

    def with_console(self, level: LogLevel = LogLevel.DEBUG, pattern: Optional[str] = None) -> "LoggerBuilder":
        """
        Enable console output.

        Args:
            level: Minimum level for the console appender
            pattern: Explicit pattern (default: follow the logger's)
        """
        self._console = (level, _compile(pattern))
        return self

    def with_file(
        self,
        filepath: str,
        level: LogLevel = LogLevel.DEBUG,
        pattern: Optional[str] = None,
    ) -> "LoggerBuilder":
        """
        Enable file output. May be called more than once.

        Args:
            filepath: Path to log file
            level: Minimum level for the file appender
            pattern: Explicit pattern (default: follow the logger's)
        """
        self._files.append((Path(filepath), level, _compile(pattern)))
        return self

    def add_appender(self, appender: LogAppender) -> "LoggerBuilder":
        """
        Add a custom appender.

        Args:
            appender: Appender instance

        Returns:
            Self for method chaining
        """
        self._custom_appenders.append(appender)
        return self

    def with_root(self, root: Logger) -> "LoggerBuilder":
        """Forward to ``root`` while the built logger has no appenders."""
        self._root = root
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        logger = Logger(self._name, self._level, self._formatter, root=self._root)

        if self._console is not None:
            level, formatter = self._console
            logger.add_appender(ConsoleAppender(level=level, formatter=formatter))

        for path, level, formatter in self._files:
            logger.add_appender(FileAppender(path, level=level, formatter=formatter))

        for appender in self._custom_appenders:
            logger.add_appender(appender)

        return logger
