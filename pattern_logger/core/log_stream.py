"""
Call-site helpers

Each helper first compares the statement's level against the logger's
level. Suppressed statements cost that comparison only: no event is
created and no context is captured.

Example:
    with log_info(logger) as out:
        out.write("loaded ").write(count).write(" items")

    log_fmt_error(logger, "connect to %s failed: %s", host, err)
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any, Union

from pattern_logger.core.log_event import LogEvent, LogEventWrap
from pattern_logger.core.log_level import LogLevel

if TYPE_CHECKING:
    from pattern_logger.core.logger import Logger


class _DisabledWrap:
    """Stand-in for a suppressed statement; discards everything."""

    event = None
    submitted = True

    @property
    def stream(self) -> io.StringIO:
        return io.StringIO()

    def write(self, text: Any) -> "_DisabledWrap":
        return self

    def format(self, fmt: str, *args: Any) -> bool:
        return False

    def submit(self) -> None:
        pass

    def __enter__(self) -> "_DisabledWrap":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        return False


DISABLED = _DisabledWrap()


def log_stream(logger: "Logger", level: LogLevel, depth: int = 1) -> Union[LogEventWrap, _DisabledWrap]:
    """
    Open a log statement.

    Args:
        logger: Target logger
        level: Statement level
        depth: Frames above the caller to record as the source location

    Returns:
        A LogEventWrap to use as a context manager, or DISABLED when
        the logger would drop the statement
    """
    if not logger.is_enabled(level):
        return DISABLED
    return LogEventWrap(LogEvent.capture(logger, level, depth=depth + 1))


def log_format(logger: "Logger", level: LogLevel, fmt: str, *args: Any) -> None:
    """Emit one printf-style formatted statement."""
    if not logger.is_enabled(level):
        return
    with LogEventWrap(LogEvent.capture(logger, level, depth=2)) as wrap:
        wrap.format(fmt, *args)


def log_debug(logger: "Logger"):
    return log_stream(logger, LogLevel.DEBUG, depth=2)


def log_info(logger: "Logger"):
    return log_stream(logger, LogLevel.INFO, depth=2)


def log_warn(logger: "Logger"):
    return log_stream(logger, LogLevel.WARN, depth=2)


def log_error(logger: "Logger"):
    return log_stream(logger, LogLevel.ERROR, depth=2)


def log_fatal(logger: "Logger"):
    return log_stream(logger, LogLevel.FATAL, depth=2)


def _log_fmt(logger: "Logger", level: LogLevel, fmt: str, args: tuple) -> None:
    if not logger.is_enabled(level):
        return
    # depth 3: _log_fmt -> log_fmt_xxx() -> calling code
    with LogEventWrap(LogEvent.capture(logger, level, depth=3)) as wrap:
        wrap.format(fmt, *args)


def log_fmt_debug(logger: "Logger", fmt: str, *args: Any) -> None:
    _log_fmt(logger, LogLevel.DEBUG, fmt, args)


def log_fmt_info(logger: "Logger", fmt: str, *args: Any) -> None:
    _log_fmt(logger, LogLevel.INFO, fmt, args)


def log_fmt_warn(logger: "Logger", fmt: str, *args: Any) -> None:
    _log_fmt(logger, LogLevel.WARN, fmt, args)


def log_fmt_error(logger: "Logger", fmt: str, *args: Any) -> None:
    _log_fmt(logger, LogLevel.ERROR, fmt, args)


def log_fmt_fatal(logger: "Logger", fmt: str, *args: Any) -> None:
    _log_fmt(logger, LogLevel.FATAL, fmt, args)
