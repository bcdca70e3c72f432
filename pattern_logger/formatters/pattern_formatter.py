"""
Pattern formatter

Compiles a printf-like pattern such as ``"[%p] %c: %m%n"`` into a chain
of format items and renders log events through it.

Pattern syntax:
    %X        placeholder X with no inline format
    %X{fmt}   placeholder X with inline format ``fmt`` (up to the first ``}``)
    %%        a literal percent sign
    anything else is copied verbatim

Placeholders:
    %m message      %p level        %r elapsed ms    %c logger name
    %t thread id    %N thread name  %F fiber id      %d{fmt} timestamp
    %f file name    %l line         %T tab           %n newline

Malformed patterns never raise. An unterminated ``{`` or a dangling
``%`` (at the end, or before whitespace or a brace) marks the formatter
as erroneous and renders a diagnostic in its place; an unknown
placeholder letter renders a diagnostic without marking the formatter.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, List, Tuple

from pattern_logger.core.log_level import LogLevel
from pattern_logger.formatters.base_formatter import BaseFormatter
from pattern_logger.formatters.format_items import (
    FORMAT_ITEMS,
    FormatItem,
    StringFormatItem,
)

if TYPE_CHECKING:
    from pattern_logger.core.log_event import LogEvent
    from pattern_logger.core.logger import Logger


DEFAULT_PATTERN = "%d{%Y-%m-%d %H:%M:%S}%T%t%T%N%T%F%T[%p]%T[%c]%T%f:%l%T%m%n"

PATTERN_ERROR_TEXT = "<<pattern_error>>"


def unrecognized_placeholder_text(code: str) -> str:
    return f"<<unrecognized placeholder %{code}>>"


def parse_pattern(pattern: str) -> Tuple[List[FormatItem], bool]:
    """
    Parse a pattern into format items.

    Args:
        pattern: Pattern text

    Returns:
        Tuple of (items, error) where error is True if the pattern
        contained an unterminated placeholder
    """
    items: List[FormatItem] = []
    literal: List[str] = []
    error = False

    def flush_literal() -> None:
        if literal:
            items.append(StringFormatItem("".join(literal)))
            literal.clear()

    i = 0
    size = len(pattern)
    while i < size:
        ch = pattern[i]
        if ch != "%":
            literal.append(ch)
            i += 1
            continue

        if i + 1 >= size or pattern[i + 1].isspace() or pattern[i + 1] in "{}":
            # '%' with no placeholder letter
            flush_literal()
            items.append(StringFormatItem(PATTERN_ERROR_TEXT))
            error = True
            i += 1
            continue

        code = pattern[i + 1]
        if code == "%":
            literal.append("%")
            i += 2
            continue

        fmt = ""
        end = i + 2
        if end < size and pattern[end] == "{":
            close = pattern.find("}", end + 1)
            if close < 0:
                flush_literal()
                items.append(StringFormatItem(PATTERN_ERROR_TEXT))
                error = True
                i = end + 1
                continue
            fmt = pattern[end + 1:close]
            end = close + 1

        flush_literal()
        factory = FORMAT_ITEMS.get(code)
        if factory is None:
            items.append(StringFormatItem(unrecognized_placeholder_text(code)))
        else:
            items.append(factory(fmt))
        i = end

    flush_literal()
    return items, error


class PatternFormatter(BaseFormatter):
    """
    Format log events through a compiled pattern.

    The pattern is parsed once at construction. Instances are immutable
    and may be shared by any number of loggers and appenders.

    Example:
        formatter = PatternFormatter("%d{%H:%M:%S} [%p] %c - %m%n")
        if formatter.is_error:
            ...
    """

    def __init__(self, pattern: str = DEFAULT_PATTERN):
        """
        Initialize pattern formatter.

        Args:
            pattern: Pattern text (see module docstring for syntax)
        """
        self._pattern = pattern
        items, error = parse_pattern(pattern)
        self._items: Tuple[FormatItem, ...] = tuple(items)
        self._error = error

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def items(self) -> Tuple[FormatItem, ...]:
        return self._items

    @property
    def is_error(self) -> bool:
        """True if the pattern failed to parse cleanly."""
        return self._error

    def format(self, logger: "Logger", level: LogLevel, event: "LogEvent") -> str:
        """
        Render an event through every item of the pattern.

        Returns:
            The concatenated record; a trailing newline is only present
            when the pattern contains %n
        """
        out = io.StringIO()
        for item in self._items:
            item.format(out, logger, level, event)
        return out.getvalue()

    def __repr__(self) -> str:
        """String representation."""
        return f"PatternFormatter(pattern={self._pattern!r})"
