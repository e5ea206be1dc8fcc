"""Logging for the grafos command."""

import logging
import sys
from logging import Formatter, LogRecord, StreamHandler
from typing import NoReturn, TextIO

# ANSI color per level name prefix.
COLORS = {
    logging.FATAL: 31,
    logging.ERROR: 31,
    logging.WARNING: 33,
    logging.INFO: 32,
    logging.DEBUG: 35,
}


class LevelFormatter(Formatter):

    """Prefixes each message with its level name, bold and colored on a TTY."""

    def __init__(self, use_color: bool):
        super().__init__("%(message)s")
        self.use_color = use_color

    def format(self, record: LogRecord) -> str:
        prefix = f"{record.levelname}:"
        if self.use_color and record.levelno in COLORS:
            prefix = f"\x1b[{COLORS[record.levelno]};1m{prefix}\x1b[0m"
        return f"{prefix} {super().format(record)}"


class GrafosHandler(StreamHandler):

    """Writes log records and stops the command at the failure level.

    Errors stop the command unless it runs with --keep-going, which raises
    failure_level to FATAL.
    """

    def __init__(self, stream: TextIO, failure_level: int):
        super().__init__(stream)
        self.failure_level = failure_level
        self.setFormatter(LevelFormatter(use_color=stream.isatty()))

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.failure_level:
            raise SystemExit(1)


def setup_logging(stream: TextIO, log_level: int, failure_level: int):
    """Route root logging to stream, replacing any earlier GrafosHandler."""
    assert log_level <= failure_level <= logging.FATAL
    logger = logging.getLogger()
    for old in [h for h in logger.handlers if isinstance(h, GrafosHandler)]:
        logger.removeHandler(old)
    logger.setLevel(log_level)
    logger.addHandler(GrafosHandler(stream, failure_level))
    logging.addLevelName(logging.FATAL, "FATAL")


def fatal(msg: str, *args) -> NoReturn:
    """Log at FATAL level and exit, whether or not a GrafosHandler is installed."""
    logging.fatal(msg, *args)
    sys.exit(1)
