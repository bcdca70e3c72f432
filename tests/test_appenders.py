"""Tests for console and file appenders"""

import io
import time

import pytest
import yaml

from pattern_logger import (
    ConsoleAppender,
    FileAppender,
    LogEvent,
    LogLevel,
    Logger,
    PatternFormatter,
)


def make_event(logger, message="hello", level=LogLevel.INFO):
    event = LogEvent(logger=logger, level=level)
    event.write(message)
    return event


@pytest.fixture
def logger():
    return Logger("app", formatter=PatternFormatter("%p %m%n"))


class TestConsoleAppender:
    """Test console appender."""

    def test_writes_to_stdout(self, logger, capsys):
        logger.add_appender(ConsoleAppender())
        logger.log(LogLevel.INFO, make_event(logger))

        assert capsys.readouterr().out == "INFO hello\n"

    def test_custom_stream(self, logger):
        stream = io.StringIO()
        logger.add_appender(ConsoleAppender(stream=stream))
        logger.log(LogLevel.WARN, make_event(logger, "careful"))

        assert stream.getvalue() == "WARN careful\n"

    def test_level_gate(self, logger):
        stream = io.StringIO()
        appender = ConsoleAppender(level=LogLevel.ERROR, stream=stream)

        appender.log(logger, LogLevel.WARN, make_event(logger))
        assert stream.getvalue() == ""

        appender.level = LogLevel.WARN
        appender.log(logger, LogLevel.WARN, make_event(logger))
        assert stream.getvalue() == ""  # no formatter yet

        appender.set_formatter(PatternFormatter("%m"))
        appender.log(logger, LogLevel.WARN, make_event(logger))
        assert stream.getvalue() == "hello"

    def test_explicit_formatter_flag(self):
        appender = ConsoleAppender()
        assert appender.has_formatter is False

        formatter = PatternFormatter("%m")
        appender.set_formatter(formatter)
        assert appender.has_formatter is True
        assert appender.inherit_formatter(PatternFormatter("%p")) is False
        assert appender.get_formatter() is formatter

        appender.set_formatter(None)
        assert appender.has_formatter is False
        assert appender.get_formatter() is None
        assert appender.inherit_formatter(formatter) is True

    def test_close_keeps_stdout_open(self, capsys):
        appender = ConsoleAppender()
        appender.close()
        print("still usable")
        assert capsys.readouterr().out == "still usable\n"


class TestFileAppender:
    """Test file appender."""

    def test_appends_records(self, tmp_path, logger):
        path = tmp_path / "logs" / "app.log"
        appender = FileAppender(str(path))
        logger.add_appender(appender)

        logger.log(LogLevel.INFO, make_event(logger, "one"))
        logger.log(LogLevel.ERROR, make_event(logger, "two"))
        appender.close()

        assert path.read_text(encoding="utf-8") == "INFO one\nERROR two\n"

    def test_appends_to_existing_file(self, tmp_path, logger):
        path = tmp_path / "app.log"
        path.write_text("existing\n", encoding="utf-8")
        appender = FileAppender(path, formatter=PatternFormatter("%m%n"))

        appender.log(logger, LogLevel.INFO, make_event(logger, "new"))
        appender.close()

        assert path.read_text(encoding="utf-8") == "existing\nnew\n"

    def test_reopen_after_rotation(self, tmp_path, logger):
        path = tmp_path / "app.log"
        appender = FileAppender(path, formatter=PatternFormatter("%m%n"))
        first_open = appender.last_reopen_time
        assert first_open > 0

        appender.log(logger, LogLevel.INFO, make_event(logger, "before"))
        path.rename(tmp_path / "app.log.1")
        time.sleep(0.01)

        assert appender.reopen() is True
        assert appender.last_reopen_time >= first_open
        appender.log(logger, LogLevel.INFO, make_event(logger, "after"))
        appender.close()

        assert (tmp_path / "app.log.1").read_text(encoding="utf-8") == "before\n"
        assert path.read_text(encoding="utf-8") == "after\n"

    def test_open_failure_skips_writes(self, tmp_path, logger, capsys):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("", encoding="utf-8")

        appender = FileAppender(blocker / "app.log", formatter=PatternFormatter("%m"))

        assert appender.is_open is False
        assert appender.reopen() is False
        appender.log(logger, LogLevel.INFO, make_event(logger))
        assert "reopen error" in capsys.readouterr().err

    def test_closed_appender_ignores_writes(self, tmp_path, logger):
        path = tmp_path / "app.log"
        appender = FileAppender(path, formatter=PatternFormatter("%m"))
        appender.close()

        appender.log(logger, LogLevel.INFO, make_event(logger))

        assert path.read_text(encoding="utf-8") == ""
        assert appender.reopen() is True
        appender.log(logger, LogLevel.INFO, make_event(logger))
        appender.close()
        assert path.read_text(encoding="utf-8") == "hello"

    def test_unencodable_text_keeps_stream_open(self, tmp_path, logger, capsys):
        path = tmp_path / "app.log"
        appender = FileAppender(path, formatter=PatternFormatter("%m%n"))
        logger.add_appender(appender)

        logger.info("bad \ud800")
        logger.info("good")
        assert appender.is_open is True
        appender.close()

        assert path.read_text(encoding="utf-8") == "bad \\ud800\ngood\n"
        assert "write error" not in capsys.readouterr().err

    def test_to_dict(self, tmp_path):
        path = tmp_path / "app.log"
        appender = FileAppender(path, level=LogLevel.WARN, formatter=PatternFormatter("%m%n"))

        data = yaml.safe_load(appender.to_yaml_string())
        appender.close()

        assert data == {
            "type": "FileAppender",
            "level": "WARN",
            "pattern": "%m%n",
            "file": str(path),
        }
