"""
Logger configuration management
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from pattern_logger.core.log_level import LogLevel
from pattern_logger.formatters.pattern_formatter import DEFAULT_PATTERN, PatternFormatter


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Describes a logger and its standard appenders. Used by the logger
    manager to build the root logger and by declarative loaders.
    """

    # Basic settings
    name: str = "root"
    level: LogLevel = LogLevel.DEBUG
    pattern: str = DEFAULT_PATTERN

    # Console settings
    console_output: bool = True
    console_level: LogLevel = LogLevel.DEBUG

    # File settings
    file_path: Optional[Path] = None
    file_level: LogLevel = LogLevel.DEBUG
    encoding: str = "utf-8"

    def __post_init__(self):
        """Validate configuration after initialization."""
        # Accept level names from text configuration
        if isinstance(self.level, str):
            self.level = LogLevel.from_string(self.level)
        if isinstance(self.console_level, str):
            self.console_level = LogLevel.from_string(self.console_level)
        if isinstance(self.file_level, str):
            self.file_level = LogLevel.from_string(self.file_level)

        # Convert file_path to Path if it's a string
        if isinstance(self.file_path, str):
            self.file_path = Path(self.file_path)

        if not self.name:
            raise ValueError("name must not be empty")
        if PatternFormatter(self.pattern).is_error:
            raise ValueError(f"invalid pattern: {self.pattern!r}")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=LogLevel.DEBUG,
            pattern="%d{%H:%M:%S}%T[%p]%T[%c]%T%f:%l%T%m%n",
        )

    @classmethod
    def production_config(cls, file_path: Optional[str] = None) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=LogLevel.INFO,
            console_level=LogLevel.WARN,
            file_path=Path(file_path) if file_path else None,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggerConfig":
        """
        Create configuration from dictionary.

        Args:
            data: Mapping with any of the dataclass field names

        Returns:
            New LoggerConfig instance
        """
        return cls(
            name=data.get("name", "root"),
            level=data.get("level", LogLevel.DEBUG),
            pattern=data.get("pattern", DEFAULT_PATTERN),
            console_output=data.get("console_output", True),
            console_level=data.get("console_level", LogLevel.DEBUG),
            file_path=data.get("file_path"),
            file_level=data.get("file_level", LogLevel.DEBUG),
            encoding=data.get("encoding", "utf-8"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "name": self.name,
            "level": LogLevel.to_string(self.level),
            "pattern": self.pattern,
            "console_output": self.console_output,
            "console_level": LogLevel.to_string(self.console_level),
            "file_path": str(self.file_path) if self.file_path else None,
            "file_level": LogLevel.to_string(self.file_level),
            "encoding": self.encoding,
        }
