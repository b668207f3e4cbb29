import io
import logging

import pytest

from routefinder.logs import (
    AbortHandler,
    RunFormatter,
    fatal,
    setup_logging,
    verbosity_level,
)


def make_record(level):
    return logging.LogRecord("test", level, __file__, 1, "record %d: %s", (3, "bad"), None)


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_error_label():
    formatter = RunFormatter(use_color=False)
    assert formatter.format(make_record(logging.ERROR)) == "ERROR: record 3: bad"


def test_error_label_colored():
    formatter = RunFormatter(use_color=True)
    text = formatter.format(make_record(logging.WARNING))
    assert text == "\x1b[33;1mWARNING:\x1b[0m record 3: bad"


def test_progress_has_no_label():
    formatter = RunFormatter(use_color=True)
    assert formatter.format(make_record(logging.INFO)) == "record 3: bad"


@pytest.mark.parametrize(
    "verbose, level",
    [(None, logging.WARNING), (0, logging.WARNING), (1, logging.INFO), (3, logging.DEBUG)],
)
def test_verbosity_level(verbose, level):
    assert verbosity_level(verbose) == level


def test_abort_handler_below_level():
    handler = AbortHandler(io.StringIO(), logging.ERROR)
    handler.emit(make_record(logging.WARNING))
    assert "record 3: bad" in handler.stream.getvalue()


def test_abort_handler_exits():
    handler = AbortHandler(io.StringIO(), logging.ERROR)
    with pytest.raises(SystemExit) as info:
        handler.emit(make_record(logging.ERROR))
    assert info.value.code == 1


def test_setup_logging_aborts_on_error(root_logger):
    stream = io.StringIO()
    setup_logging(stream, None, keep_going=False)
    with pytest.raises(SystemExit):
        logging.error("record %d: %s", 2, "cycle")
    assert "ERROR: record 2: cycle" in stream.getvalue()


def test_setup_logging_keep_going(root_logger):
    stream = io.StringIO()
    setup_logging(stream, 1, keep_going=True)
    logging.error("record %d: %s", 2, "cycle")
    logging.info("built graph")
    assert stream.getvalue() == "ERROR: record 2: cycle\nbuilt graph\n"
    with pytest.raises(SystemExit):
        fatal("cannot read %s", "input.txt")


def test_fatal_exits():
    with pytest.raises(SystemExit):
        fatal("boom")
