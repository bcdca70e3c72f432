"""
Log event data structure and the scoped emission wrapper
"""

from __future__ import annotations

import io
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from pattern_logger.core.log_level import LogLevel
from pattern_logger.core import runtime

if TYPE_CHECKING:
    from pattern_logger.core.logger import Logger


@dataclass(frozen=True)
class LogEvent:
    """
    Log event data structure.

    Snapshot of the context of one logging statement. All context
    fields are fixed at construction; only the message buffer grows
    while the statement is being written.
    """

    logger: Optional["Logger"]
    level: LogLevel
    file_name: str = ""
    line: int = 0
    elapse: int = 0
    thread_id: int = 0
    fiber_id: int = 0
    time: int = 0
    thread_name: str = ""
    _buffer: io.StringIO = field(
        default_factory=io.StringIO, init=False, repr=False, compare=False
    )

    @classmethod
    def capture(cls, logger: Optional["Logger"], level: LogLevel, depth: int = 1) -> "LogEvent":
        """
        Create an event from the current execution context.

        Args:
            logger: Logger that owns the event
            level: Severity of the statement
            depth: Frames above the caller to take file and line from
                   (1 means the caller of capture())

        Returns:
            New LogEvent with an empty message buffer
        """
        file_name, line = runtime.caller_location(depth)
        return cls(
            logger=logger,
            level=level,
            file_name=file_name,
            line=line,
            elapse=runtime.elapsed_ms(),
            thread_id=runtime.current_thread_id(),
            fiber_id=runtime.current_fiber_id(),
            time=int(time.time()),
            thread_name=runtime.current_thread_name(),
        )

    @property
    def stream(self) -> io.StringIO:
        """Message buffer, for incremental writes."""
        return self._buffer

    @property
    def content(self) -> str:
        """Message text accumulated so far."""
        return self._buffer.getvalue()

    def write(self, text: Any) -> "LogEvent":
        """Append text to the message buffer."""
        self._buffer.write(text if isinstance(text, str) else str(text))
        return self

    def format(self, fmt: str, *args: Any) -> bool:
        """
        Render a printf-style format string into the message buffer.

        A single mapping argument is used for named conversions
        such as "%(user)s".

        Returns:
            True if the text was appended, False if formatting failed,
            including errors raised by an argument's __str__ (the
            buffer is left unchanged in that case)
        """
        values: Any = args
        if len(args) == 1 and isinstance(args[0], Mapping):
            values = args[0]
        try:
            text = fmt % values
        except Exception:
            return False
        self._buffer.write(text)
        return True


class LogEventWrap:
    """
    Scoped guard that submits one event to its logger.

    Leaving the ``with`` block (normally or through an exception)
    dispatches the event exactly once, even if no message was written.

    Example:
        with LogEventWrap(LogEvent.capture(logger, LogLevel.INFO)) as ev:
            ev.write("user ").write(user_id)
    """

    def __init__(self, event: LogEvent):
        self._event = event
        self._submitted = False

    @property
    def event(self) -> LogEvent:
        return self._event

    @property
    def stream(self) -> io.StringIO:
        return self._event.stream

    @property
    def submitted(self) -> bool:
        return self._submitted

    def write(self, text: Any) -> "LogEventWrap":
        """Append text to the wrapped event."""
        self._event.write(text)
        return self

    def format(self, fmt: str, *args: Any) -> bool:
        """Render a printf-style format into the wrapped event."""
        return self._event.format(fmt, *args)

    def submit(self) -> None:
        """Dispatch the event to its logger. Later calls do nothing."""
        if self._submitted:
            return
        self._submitted = True

        logger = self._event.logger
        if logger is not None:
            logger.log(self._event.level, self._event)

    def __enter__(self) -> "LogEventWrap":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.submit()
        return False
