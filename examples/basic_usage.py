#!/usr/bin/env python3
"""Basic usage example"""

from pattern_logger import (
    FileAppender,
    LogLevel,
    get_logger,
    get_root,
    log_fmt_info,
    log_info,
    shutdown,
)

def main():
    # Root logger writes to the console with the default pattern
    root = get_root()
    root.info("Application started")

    # Named logger with its own file appender and a shorter pattern
    logger = get_logger("example")
    logger.set_formatter("%d{%H:%M:%S}%T[%p]%T[%c]%T%m%n")
    logger.add_appender(FileAppender("logs/example.log", level=LogLevel.WARN))

    logger.debug("This is debug")
    logger.warn("Disk usage at %d%%", 91)

    # Streaming statement, submitted when the block exits
    with log_info(logger) as out:
        out.write("loaded ").write(42).write(" items")

    log_fmt_info(logger, "user=%s action=%s", "alice", "login")

    # Dump configuration
    print(logger.to_yaml_string())

    shutdown()

if __name__ == "__main__":
    main()
