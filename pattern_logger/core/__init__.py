"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Named channel dispatching events to appenders
- LoggerManager: Registry of named loggers with a root logger
- LoggerBuilder: Builder pattern for logger construction
- LogEvent / LogEventWrap: Log event and its scoped emitter
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from pattern_logger.core.log_level import LogLevel
from pattern_logger.core.log_event import LogEvent, LogEventWrap
from pattern_logger.core.logger import Logger
from pattern_logger.core.logger_config import LoggerConfig
from pattern_logger.core.logger_builder import LoggerBuilder
from pattern_logger.core.logger_manager import (
    LoggerManager,
    get_logger,
    get_manager,
    get_root,
    shutdown,
)

__all__ = [
    "Logger",
    "LoggerManager",
    "LoggerBuilder",
    "LogEvent",
    "LogEventWrap",
    "LogLevel",
    "LoggerConfig",
    "get_logger",
    "get_manager",
    "get_root",
    "shutdown",
]
