"""Logging for route runs."""

import logging
import sys
from logging import Formatter, LogRecord, StreamHandler
from typing import NoReturn, Optional, TextIO

# Levels a run emits, with the ANSI color of each label.
LEVEL_COLORS = {
    logging.FATAL: 31,
    logging.ERROR: 31,
    logging.WARNING: 33,
}


class RunFormatter(Formatter):

    """Formats records as "LEVEL: message", bold and colored on a TTY.

    INFO and DEBUG records carry progress (records read, vertices built) and
    are printed without a label.
    """

    def __init__(self, use_color: bool):
        super().__init__("%(message)s")
        self.use_color = use_color

    def format(self, record: LogRecord) -> str:
        message = super().format(record)
        if record.levelno < logging.WARNING:
            return message
        label = record.levelname
        code = LEVEL_COLORS.get(record.levelno)
        if self.use_color and code:
            label = f"\x1b[{code};1m{label}:\x1b[0m"
        else:
            label += ":"
        return f"{label} {message}"


class AbortHandler(StreamHandler):

    """Stream handler that ends the run once a record reaches abort_level.

    Without --keep-going, the first error (a malformed record, a cycle) aborts
    before any route is written. With it, only fatal records abort.
    """

    def __init__(self, stream: Optional[TextIO], abort_level: int):
        super().__init__(stream)
        self.abort_level = abort_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.abort_level:
            sys.exit(1)


def verbosity_level(verbose: Optional[int]) -> int:
    """Map the count of -v flags to a log level."""
    if not verbose:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(stream: TextIO, verbose: Optional[int], keep_going: bool):
    """Install an AbortHandler on the root logger."""
    logger = logging.getLogger()
    logger.setLevel(verbosity_level(verbose))
    abort_level = logging.FATAL if keep_going else logging.ERROR
    handler = AbortHandler(stream, abort_level)
    handler.setFormatter(RunFormatter(use_color=stream.isatty()))
    logger.addHandler(handler)
    logging.addLevelName(logging.FATAL, "FATAL")


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log at FATAL and exit, even when no AbortHandler is installed."""
    logging.fatal(msg, *args, **kwargs)
    sys.exit(1)
