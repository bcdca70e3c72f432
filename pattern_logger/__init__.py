"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Pattern Logger - A synchronous logging framework with
printf-like pattern formatting
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from pattern_logger.core.log_level import LogLevel
from pattern_logger.core.log_event import LogEvent, LogEventWrap
from pattern_logger.core.logger import Logger
from pattern_logger.core.logger_builder import LoggerBuilder
from pattern_logger.core.logger_config import LoggerConfig
from pattern_logger.core.logger_manager import (
    LoggerManager,
    get_logger,
    get_manager,
    get_root,
    shutdown,
)
from pattern_logger.core.log_stream import (
    log_stream,
    log_format,
    log_debug,
    log_info,
    log_warn,
    log_error,
    log_fatal,
    log_fmt_debug,
    log_fmt_info,
    log_fmt_warn,
    log_fmt_error,
    log_fmt_fatal,
)
from pattern_logger.formatters.pattern_formatter import DEFAULT_PATTERN, PatternFormatter
from pattern_logger.appenders import LogAppender, ConsoleAppender, FileAppender

# Import submodules (not all classes by default)
from pattern_logger import appenders
from pattern_logger import formatters

__all__ = [
    "Logger",
    "LoggerManager",
    "LoggerBuilder",
    "LogEvent",
    "LogEventWrap",
    "LogLevel",
    "LoggerConfig",
    "PatternFormatter",
    "DEFAULT_PATTERN",
    "LogAppender",
    "ConsoleAppender",
    "FileAppender",
    "get_logger",
    "get_manager",
    "get_root",
    "shutdown",
    "log_stream",
    "log_format",
    "log_debug",
    "log_info",
    "log_warn",
    "log_error",
    "log_fatal",
    "log_fmt_debug",
    "log_fmt_info",
    "log_fmt_warn",
    "log_fmt_error",
    "log_fmt_fatal",
    "appenders",
    "formatters",
]
