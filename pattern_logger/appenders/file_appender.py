"""File appender"""

import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

from pattern_logger.appenders.base_appender import LogAppender
from pattern_logger.core.log_level import LogLevel
from pattern_logger.formatters.base_formatter import BaseFormatter


class FileAppender(LogAppender):
    """
    Write log records to a file.

    The file is opened in append mode when the appender is created.
    If opening fails, or a later write fails, records are skipped until
    reopen() succeeds. Rotation policies live outside this class: they
    call reopen() after moving the file away and can consult
    last_reopen_time to decide when to do so.

    Characters the encoding cannot represent are written as backslash
    escapes instead of failing the record.
    """

    type_name = "FileAppender"

    def __init__(
        self,
        filepath: Union[str, Path],
        level: LogLevel = LogLevel.DEBUG,
        formatter: Optional[BaseFormatter] = None,
        encoding: str = "utf-8",
        auto_flush: bool = True,
    ):
        """
        Initialize file appender.

        Args:
            filepath: Path to log file
            level: Minimum level to write
            formatter: Explicit formatter (default: inherit from logger)
            encoding: File encoding (default: 'utf-8')
            auto_flush: Flush the file after every record
        """
        super().__init__(level, formatter)
        self.filepath = Path(filepath)
        self.encoding = encoding
        self.auto_flush = auto_flush
        self._file: Optional[TextIO] = None
        self._last_reopen_time = 0.0
        self.reopen()

    @property
    def filename(self) -> str:
        return str(self.filepath)

    @property
    def last_reopen_time(self) -> float:
        """Wall-clock time of the last successful reopen() (0.0 if never)."""
        with self._write_lock:
            return self._last_reopen_time

    @property
    def is_open(self) -> bool:
        with self._write_lock:
            return self._file is not None

    def _close_file(self) -> None:
        """Close the current stream. Caller must hold the write lock."""
        if self._file is None:
            return
        try:
            self._file.close()
        except OSError:
            pass  # Stream is dropped either way
        self._file = None

    def reopen(self) -> bool:
        """
        Close the current stream and open the target path again.

        Returns:
            True if the file is open for appending afterwards
        """
        with self._write_lock:
            self._close_file()
            try:
                self.filepath.parent.mkdir(parents=True, exist_ok=True)
                self._file = open(
                    self.filepath, "a", encoding=self.encoding, errors="backslashreplace"
                )
            except OSError as e:
                print(f"FileAppender reopen error: {self.filepath}: {e}", file=sys.stderr)
                return False
            self._last_reopen_time = time.time()
            return True

    def _write(self, text: str) -> None:
        """Write record, dropping the stream if the write fails."""
        with self._write_lock:
            if self._file is None:
                return
            try:
                self._file.write(text)
                if self.auto_flush:
                    self._file.flush()
            except (OSError, ValueError) as e:
                print(f"FileAppender write error: {self.filepath}: {e}", file=sys.stderr)
                self._close_file()

    def flush(self):
        """Flush file buffer."""
        with self._write_lock:
            if self._file is not None:
                try:
                    self._file.flush()
                except (OSError, ValueError):
                    pass  # Reported on the next write

    def close(self):
        """Close file."""
        with self._write_lock:
            self._close_file()

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["file"] = self.filename
        return data
