"""Console appender"""

import sys
from typing import Optional, TextIO

from pattern_logger.appenders.base_appender import LogAppender
from pattern_logger.core.log_level import LogLevel
from pattern_logger.formatters.base_formatter import BaseFormatter


class ConsoleAppender(LogAppender):
    """Write log records to standard output."""

    type_name = "ConsoleAppender"

    def __init__(
        self,
        level: LogLevel = LogLevel.DEBUG,
        formatter: Optional[BaseFormatter] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize console appender.

        Args:
            level: Minimum level to write
            formatter: Explicit formatter (default: inherit from logger)
            stream: Output stream (default: sys.stdout at write time)
        """
        super().__init__(level, formatter)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        """Write record and flush immediately."""
        stream = self.stream
        with self._write_lock:
            stream.write(text)
            stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()
