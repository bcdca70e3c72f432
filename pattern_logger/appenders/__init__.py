"""Appenders module - Log output sinks"""

from pattern_logger.appenders.base_appender import LogAppender
from pattern_logger.appenders.console_appender import ConsoleAppender
from pattern_logger.appenders.file_appender import FileAppender

__all__ = ["LogAppender", "ConsoleAppender", "FileAppender"]
