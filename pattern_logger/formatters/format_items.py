"""
Format items

Each item renders one piece of a log record: a literal string or a
single attribute of the event. Pattern formatters chain them.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Dict, TextIO

from pattern_logger.core.log_level import LogLevel

if TYPE_CHECKING:
    from pattern_logger.core.log_event import LogEvent
    from pattern_logger.core.logger import Logger


DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class FormatItem(ABC):
    """
    Abstract base class for format items.

    Items are built once by the pattern parser and never change
    afterwards. ``fmt`` is the inline format from ``%X{fmt}``; most
    items ignore it.
    """

    def __init__(self, fmt: str = ""):
        self._fmt = fmt

    @abstractmethod
    def format(self, out: TextIO, logger: "Logger", level: LogLevel, event: "LogEvent") -> None:
        """
        Write this item's text for an event.

        Args:
            out: Text stream collecting the record
            logger: Logger dispatching the event
            level: Level the event is being logged at
            event: The log event
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MessageFormatItem(FormatItem):
    def format(self, out, logger, level, event):
        out.write(event.content)


class LevelFormatItem(FormatItem):
    def format(self, out, logger, level, event):
        out.write(LogLevel.to_string(level))


class ElapseFormatItem(FormatItem):
    def format(self, out, logger, level, event):
        out.write(str(event.elapse))


class NameFormatItem(FormatItem):
    """Name of the logger the event was created for."""

    def format(self, out, logger, level, event):
        owner = event.logger if event.logger is not None else logger
        if owner is not None:
            out.write(owner.name)


class ThreadIdFormatItem(FormatItem):
    def format(self, out, logger, level, event):
        out.write(str(event.thread_id))


class FiberIdFormatItem(FormatItem):
    def format(self, out, logger, level, event):
        out.write(str(event.fiber_id))


class ThreadNameFormatItem(FormatItem):
    def format(self, out, logger, level, event):
        out.write(event.thread_name)


class DateTimeFormatItem(FormatItem):
    """
    Event timestamp in local time.

    The inline format is a strftime template; an empty one falls back
    to DEFAULT_DATETIME_FORMAT.
    """

    def __init__(self, fmt: str = DEFAULT_DATETIME_FORMAT):
        super().__init__(fmt or DEFAULT_DATETIME_FORMAT)

    @property
    def datetime_format(self) -> str:
        return self._fmt

    def format(self, out, logger, level, event):
        try:
            out.write(time.strftime(self._fmt, time.localtime(event.time)))
        except (ValueError, OverflowError, OSError):
            # Platform rejected the template or the timestamp
            return

    def __repr__(self) -> str:
        return f"DateTimeFormatItem({self._fmt!r})"


class FileNameFormatItem(FormatItem):
    def format(self, out, logger, level, event):
        out.write(event.file_name)


class LineFormatItem(FormatItem):
    def format(self, out, logger, level, event):
        out.write(str(event.line))


class NewLineFormatItem(FormatItem):
    def format(self, out, logger, level, event):
        out.write("\n")


class TabFormatItem(FormatItem):
    def format(self, out, logger, level, event):
        out.write("\t")


class StringFormatItem(FormatItem):
    """Literal text."""

    def __init__(self, text: str):
        super().__init__(text)

    @property
    def text(self) -> str:
        return self._fmt

    def format(self, out, logger, level, event):
        out.write(self._fmt)

    def __repr__(self) -> str:
        return f"StringFormatItem({self._fmt!r})"


# Placeholder letter -> item factory
FORMAT_ITEMS: Dict[str, Callable[[str], FormatItem]] = {
    "m": MessageFormatItem,
    "p": LevelFormatItem,
    "r": ElapseFormatItem,
    "c": NameFormatItem,
    "t": ThreadIdFormatItem,
    "n": NewLineFormatItem,
    "d": DateTimeFormatItem,
    "f": FileNameFormatItem,
    "l": LineFormatItem,
    "T": TabFormatItem,
    "F": FiberIdFormatItem,
    "N": ThreadNameFormatItem,
}
