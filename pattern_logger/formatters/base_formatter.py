"""
Base formatter interface
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pattern_logger.core.log_level import LogLevel

if TYPE_CHECKING:
    from pattern_logger.core.log_event import LogEvent
    from pattern_logger.core.logger import Logger


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert a log event, as dispatched by a logger at a
    given level, into one text record.
    """

    @abstractmethod
    def format(self, logger: "Logger", level: LogLevel, event: "LogEvent") -> str:
        """
        Format a log event into a string.

        Args:
            logger: Logger dispatching the event
            level: Level the event is logged at
            event: The log event to format

        Returns:
            Formatted record; never raises
        """
        pass

    def __call__(self, logger: "Logger", level: LogLevel, event: "LogEvent") -> str:
        """Allow formatters to be callable."""
        return self.format(logger, level, event)
