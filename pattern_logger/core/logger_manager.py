"""
Logger registry

Hands out named loggers and owns the root logger every other logger
falls back to.
"""

from __future__ import annotations

import atexit
import sys
import threading
from typing import Any, Dict, List, Optional

import yaml

from pattern_logger.appenders.base_appender import LogAppender
from pattern_logger.appenders.console_appender import ConsoleAppender
from pattern_logger.appenders.file_appender import FileAppender
from pattern_logger.core.logger import Logger
from pattern_logger.core.logger_config import LoggerConfig
from pattern_logger.formatters.pattern_formatter import PatternFormatter


class LoggerManager:
    """
    Name-keyed logger registry.

    The root logger is created with the manager. Loggers created by
    get_logger() start with the root's level and formatter and forward
    to the root until appenders are attached to them.

    Thread Safety:
        Lookup and creation happen under one registry lock.

    Example:
        manager = LoggerManager()
        db_logger = manager.get_logger("db")
        db_logger.info("connected")
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        """
        Initialize manager and its root logger.

        Args:
            config: Root logger configuration (default: LoggerConfig.default())
        """
        self._config = config or LoggerConfig.default()
        self._lock = threading.Lock()
        self._root = self._build_root(self._config)
        self._loggers: Dict[str, Logger] = {self._root.name: self._root}

    @staticmethod
    def _build_root(config: LoggerConfig) -> Logger:
        root = Logger(config.name, config.level, PatternFormatter(config.pattern))
        if config.console_output:
            root.add_appender(ConsoleAppender(level=config.console_level))
        if config.file_path is not None:
            root.add_appender(
                FileAppender(config.file_path, level=config.file_level, encoding=config.encoding)
            )
        return root

    @property
    def config(self) -> LoggerConfig:
        return self._config

    def get_root(self) -> Logger:
        """Get the root logger."""
        return self._root

    def get_logger(self, name: str) -> Logger:
        """
        Get the logger for a name, creating it on first use.

        Args:
            name: Logger name

        Returns:
            The single Logger registered under ``name``
        """
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = Logger(
                    name,
                    level=self._root.level,
                    formatter=self._root.get_formatter(),
                    root=self._root,
                )
                self._loggers[name] = logger
            return logger

    def get_loggers(self) -> Dict[str, Logger]:
        """Snapshot of all registered loggers by name."""
        with self._lock:
            return dict(self._loggers)

    def _distinct_appenders(self) -> List[LogAppender]:
        seen = set()
        appenders: List[LogAppender] = []
        for logger in self.get_loggers().values():
            for appender in logger.get_appenders():
                if id(appender) not in seen:
                    seen.add(id(appender))
                    appenders.append(appender)
        return appenders

    def flush(self) -> None:
        """Flush every appender reachable from the registry."""
        for appender in self._distinct_appenders():
            try:
                appender.flush()
            except Exception as e:
                print(f"Appender flush error: {e}", file=sys.stderr)

    def shutdown(self) -> None:
        """Flush and close every appender reachable from the registry."""
        for appender in self._distinct_appenders():
            try:
                appender.close()
            except Exception as e:
                print(f"Appender close error: {e}", file=sys.stderr)

    def to_dict(self) -> List[Dict[str, Any]]:
        """Configuration of all loggers, root first."""
        loggers = self.get_loggers()
        ordered = [self._root] + [
            logger for name, logger in sorted(loggers.items()) if logger is not self._root
        ]
        return [logger.to_dict() for logger in ordered]

    def to_yaml_string(self) -> str:
        """Configuration of all loggers as YAML text."""
        return yaml.safe_dump(
            {"logs": self.to_dict()}, sort_keys=False, default_flow_style=False
        )


_manager: Optional[LoggerManager] = None
_manager_lock = threading.Lock()


def get_manager() -> LoggerManager:
    """
    Get the process-wide logger manager, creating it on first use.

    The manager's appenders are closed at interpreter exit; call
    shutdown() to do it earlier.
    """
    global _manager
    manager = _manager
    if manager is not None:
        return manager

    with _manager_lock:
        if _manager is None:
            _manager = LoggerManager()
            atexit.register(_manager.shutdown)
        return _manager


def get_logger(name: str) -> Logger:
    """Get a logger from the process-wide manager."""
    return get_manager().get_logger(name)


def get_root() -> Logger:
    """Get the process-wide root logger."""
    return get_manager().get_root()


def shutdown() -> None:
    """Flush and close the process-wide manager's appenders."""
    manager = _manager
    if manager is not None:
        manager.shutdown()
