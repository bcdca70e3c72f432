"""
Log formatters module

Provides the pattern formatter and the format items it is built from.
"""

from pattern_logger.formatters.base_formatter import BaseFormatter
from pattern_logger.formatters.format_items import FORMAT_ITEMS, FormatItem
from pattern_logger.formatters.pattern_formatter import (
    DEFAULT_PATTERN,
    PatternFormatter,
    parse_pattern,
)

__all__ = [
    "BaseFormatter",
    "FormatItem",
    "FORMAT_ITEMS",
    "DEFAULT_PATTERN",
    "PatternFormatter",
    "parse_pattern",
]
