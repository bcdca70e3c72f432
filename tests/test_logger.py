"""Basic tests for logger system"""

import itertools
import os

import pytest

from pattern_logger import (
    ConsoleAppender,
    LogAppender,
    LogEvent,
    LogEventWrap,
    LogLevel,
    Logger,
    LoggerBuilder,
    LoggerConfig,
    PatternFormatter,
)


class MemoryAppender(LogAppender):
    """Appender collecting rendered records for inspection."""

    type_name = "MemoryAppender"

    def __init__(self, level=LogLevel.DEBUG, formatter=None):
        super().__init__(level, formatter)
        self.records = []

    def _write(self, text):
        self.records.append(text)


def make_event(logger, level=LogLevel.INFO, message=""):
    event = LogEvent(logger=logger, level=level, file_name="app.py", line=7)
    event.write(message)
    return event


LEVELS = [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR, LogLevel.FATAL]


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.UNKNOWN < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.FATAL

    def test_to_string(self):
        assert LogLevel.to_string(LogLevel.WARN) == "WARN"
        assert LogLevel.to_string(5) == "FATAL"
        assert LogLevel.to_string(42) == "UNKNOWN"
        assert LogLevel.to_string(None) == "UNKNOWN"
        assert str(LogLevel.ERROR) == "ERROR"

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string("Warn") == LogLevel.WARN

    def test_from_string_unknown(self):
        assert LogLevel.from_string("verbose") == LogLevel.UNKNOWN
        assert LogLevel.from_string("") == LogLevel.UNKNOWN
        assert LogLevel.from_string(None) == LogLevel.UNKNOWN

    def test_round_trip(self):
        for level in LogLevel:
            assert LogLevel.from_string(LogLevel.to_string(level)) == level


class TestLogEvent:
    """Test log event structure."""

    def test_capture_context(self):
        logger = Logger("capture")
        event = LogEvent.capture(logger, LogLevel.WARN)

        assert event.logger is logger
        assert event.level == LogLevel.WARN
        assert os.path.basename(event.file_name) == "test_logger.py"
        assert event.line > 0
        assert event.thread_id > 0
        assert event.thread_name
        assert event.fiber_id == 0
        assert event.time > 0
        assert event.elapse >= 0

    def test_fields_are_immutable(self):
        event = make_event(None)
        with pytest.raises(AttributeError):
            event.line = 3

    def test_stream_content(self):
        event = make_event(None)
        event.write("a").write(1)
        event.stream.write("b")
        assert event.content == "a1b"

    def test_format(self):
        event = make_event(None, message="x=")
        assert event.format("%d/%s", 3, "y") is True
        assert event.content == "x=3/y"

    def test_format_mapping(self):
        event = make_event(None)
        event.format("%(user)s logged in", {"user": "alice"})
        assert event.content == "alice logged in"

    def test_format_failure_leaves_buffer(self):
        event = make_event(None, message="keep")
        assert event.format("%d", "not a number") is False
        assert event.format("%s %s", 1) is False
        assert event.content == "keep"

    def test_format_argument_errors_leave_buffer(self):
        class Unprintable:
            def __str__(self):
                raise RuntimeError("no text")

        event = make_event(None, message="keep")
        assert event.format("%c", 0x110000) is False
        assert event.format("%s", Unprintable()) is False
        assert event.content == "keep"


class TestLogEventWrap:
    """Test scoped event submission."""

    def test_submits_on_exit(self):
        logger = Logger("wrap", formatter=PatternFormatter("%p:%m"))
        appender = MemoryAppender()
        logger.add_appender(appender)

        with LogEventWrap(make_event(logger, LogLevel.ERROR)) as wrap:
            wrap.write("boom")
            assert appender.records == []

        assert appender.records == ["ERROR:boom"]
        assert wrap.submitted is True

    def test_submits_exactly_once(self):
        logger = Logger("wrap", formatter=PatternFormatter("%m"))
        appender = MemoryAppender()
        logger.add_appender(appender)

        wrap = LogEventWrap(make_event(logger))
        with wrap:
            wrap.submit()
        wrap.submit()

        assert len(appender.records) == 1

    def test_submits_empty_message(self):
        logger = Logger("wrap", formatter=PatternFormatter("[%m]"))
        appender = MemoryAppender()
        logger.add_appender(appender)

        with LogEventWrap(make_event(logger)):
            pass

        assert appender.records == ["[]"]

    def test_submits_on_exception(self):
        logger = Logger("wrap", formatter=PatternFormatter("%m"))
        appender = MemoryAppender()
        logger.add_appender(appender)

        with pytest.raises(RuntimeError):
            with LogEventWrap(make_event(logger)) as wrap:
                wrap.write("partial")
                raise RuntimeError("stop")

        assert appender.records == ["partial"]


class TestLogger:
    """Test main logger functionality."""

    def test_level_matrix(self):
        """Sink receives output iff event clears both logger and appender levels."""
        for logger_level, appender_level, event_level in itertools.product(LEVELS, repeat=3):
            logger = Logger("matrix", level=logger_level, formatter=PatternFormatter("%m"))
            appender = MemoryAppender(level=appender_level)
            logger.add_appender(appender)

            logger.log(event_level, make_event(logger, event_level, "x"))

            expected = event_level >= logger_level and event_level >= appender_level
            assert (appender.records == ["x"]) is expected

    def test_convenience_methods(self):
        logger = Logger("conv", level=LogLevel.INFO, formatter=PatternFormatter("%p %m|"))
        appender = MemoryAppender()
        logger.add_appender(appender)

        logger.debug("hidden")
        logger.info("plain 100%")
        logger.warn("disk %d%%", 91)
        logger.error("user=%s", "bob")
        logger.fatal(make_event(logger, LogLevel.DEBUG, "event"))

        assert appender.records == [
            "INFO plain 100%|",
            "WARN disk 91%|",
            "ERROR user=bob|",
            "FATAL event|",
        ]

    def test_bad_arguments_still_emit(self):
        class Unprintable:
            def __str__(self):
                raise RuntimeError("no text")

        logger = Logger("args", formatter=PatternFormatter("%p %m|"))
        appender = MemoryAppender()
        logger.add_appender(appender)

        logger.info("%c", 0x110000)
        logger.warn("value=%s", Unprintable())

        assert appender.records == ["INFO |", "WARN |"]

    def test_convenience_records_call_site(self):
        logger = Logger("site", formatter=PatternFormatter("%f:%l"))
        appender = MemoryAppender()
        logger.add_appender(appender)

        logger.info("here")

        file_name, line = appender.records[0].rsplit(":", 1)
        assert os.path.basename(file_name) == "test_logger.py"
        assert int(line) > 0

    def test_del_appender(self):
        logger = Logger("del")
        first, second = MemoryAppender(), MemoryAppender()
        logger.add_appender(first)
        logger.add_appender(second)
        logger.add_appender(first)

        logger.del_appender(first)

        assert logger.get_appenders() == (second, first)

    def test_del_missing_appender_is_noop(self):
        logger = Logger("del")
        logger.add_appender(MemoryAppender())

        logger.del_appender(MemoryAppender())

        assert len(logger.get_appenders()) == 1

    def test_clear_appenders(self):
        logger = Logger("clear")
        logger.add_appender(MemoryAppender())
        logger.add_appender(MemoryAppender())
        logger.clear_appenders()
        assert logger.get_appenders() == ()

    def test_add_appender_inherits_formatter(self):
        formatter = PatternFormatter("%m")
        logger = Logger("inherit", formatter=formatter)
        appender = MemoryAppender()

        logger.add_appender(appender)

        assert appender.get_formatter() is formatter
        assert appender.has_formatter is False

    def test_set_formatter_propagates(self):
        logger = Logger("push", formatter=PatternFormatter("old:%m"))
        inheriting = MemoryAppender()
        explicit = MemoryAppender(formatter=PatternFormatter("own:%m"))
        logger.add_appender(inheriting)
        logger.add_appender(explicit)

        f2 = PatternFormatter("new:%m")
        assert logger.set_formatter(f2) is True
        logger.info("x")

        assert inheriting.get_formatter() is f2
        assert inheriting.records == ["new:x"]
        assert explicit.records == ["own:x"]

    def test_set_formatter_from_text(self):
        logger = Logger("text")
        appender = MemoryAppender()
        logger.add_appender(appender)

        assert logger.set_formatter("[%p] %m%n") is True
        logger.info("hello")

        assert logger.get_formatter().pattern == "[%p] %m%n"
        assert appender.records == ["[INFO] hello\n"]

    def test_set_invalid_formatter_keeps_previous(self, capsys):
        original = PatternFormatter("%m")
        logger = Logger("invalid", formatter=original)
        appender = MemoryAppender()
        logger.add_appender(appender)

        assert logger.set_formatter("%d{%Y") is False
        assert logger.set_formatter(None) is False

        assert logger.get_formatter() is original
        assert appender.get_formatter() is original
        assert "invalid formatter" in capsys.readouterr().err

    def test_cleared_appender_formatter_follows_logger_again(self):
        logger = Logger("reset", formatter=PatternFormatter("a:%m"))
        appender = MemoryAppender(formatter=PatternFormatter("own:%m"))
        logger.add_appender(appender)

        appender.set_formatter(None)
        logger.set_formatter("b:%m")
        logger.info("x")

        assert appender.records == ["b:x"]

    def test_forwards_to_root_without_appenders(self):
        root = Logger("root", formatter=PatternFormatter("%c:%m"))
        appender = MemoryAppender()
        root.add_appender(appender)
        child = Logger("child", root=root, formatter=root.get_formatter())

        child.info("via root")

        assert appender.records == ["child:via root"]

    def test_appender_error_does_not_stop_dispatch(self, capsys):
        class BrokenAppender(MemoryAppender):
            def _write(self, text):
                raise RuntimeError("sink down")

        logger = Logger("broken", formatter=PatternFormatter("%m"))
        good = MemoryAppender()
        logger.add_appender(BrokenAppender())
        logger.add_appender(good)

        logger.info("still here")

        assert good.records == ["still here"]
        assert "sink down" in capsys.readouterr().err

    def test_is_enabled(self):
        logger = Logger("gate", level=LogLevel.WARN)
        assert logger.is_enabled(LogLevel.ERROR)
        assert logger.is_enabled(LogLevel.WARN)
        assert not logger.is_enabled(LogLevel.INFO)

        logger.level = LogLevel.DEBUG
        assert logger.is_enabled(LogLevel.INFO)

    def test_to_dict(self):
        logger = Logger("dump", level=LogLevel.WARN, formatter=PatternFormatter("%m%n"))
        logger.add_appender(ConsoleAppender(level=LogLevel.ERROR))

        data = logger.to_dict()

        assert data["name"] == "dump"
        assert data["level"] == "WARN"
        assert data["pattern"] == "%m%n"
        assert data["appenders"] == [{"type": "ConsoleAppender", "level": "ERROR"}]


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.name == "root"
        assert config.level == LogLevel.DEBUG
        assert config.console_output is True
        assert config.file_path is None

    def test_level_names(self):
        config = LoggerConfig(level="warn", file_path="logs/app.log")
        assert config.level == LogLevel.WARN
        assert str(config.file_path) == "logs/app.log"

    def test_invalid_pattern_raises(self):
        with pytest.raises(ValueError):
            LoggerConfig(pattern="%d{%Y")

    def test_empty_name_raises(self):
        with pytest.raises(ValueError):
            LoggerConfig(name="")

    def test_dict_round_trip(self):
        config = LoggerConfig.production_config("logs/app.log")
        restored = LoggerConfig.from_dict(config.to_dict())
        assert restored == config


class TestLoggerBuilder:
    """Test logger builder."""

    def test_builder_pattern(self, tmp_path):
        path = tmp_path / "built.log"
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .with_level(LogLevel.INFO)
            .with_pattern("%p %m%n")
            .with_console(level=LogLevel.ERROR)
            .with_file(str(path), pattern="%m%n")
            .build())

        assert logger.name == "builder_test"
        assert logger.level == LogLevel.INFO
        console, file_appender = logger.get_appenders()
        assert console.level == LogLevel.ERROR
        assert console.has_formatter is False
        assert file_appender.has_formatter is True

        logger.info("to file")
        file_appender.close()
        assert path.read_text(encoding="utf-8") == "to file\n"

    def test_invalid_pattern_raises(self):
        with pytest.raises(ValueError):
            LoggerBuilder().with_pattern("%d{%Y")

    def test_custom_appender_and_root(self):
        root = Logger("root")
        appender = MemoryAppender()
        logger = LoggerBuilder().with_name("x").with_root(root).add_appender(appender).build()

        assert logger.root is root
        assert logger.get_appenders() == (appender,)
