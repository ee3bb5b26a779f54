import logging
import re

from cargonuget.logger import ColorFormatter, init

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text):
    return _ANSI.sub("", text)


def _record(level, msg):
    return logging.LogRecord("cargonuget", level, __file__, 1, msg, None, None)


def test_info_is_unprefixed():
    assert ColorFormatter().format(_record(logging.INFO, "building nupkg")) == "building nupkg"


def test_error_prefix():
    out = ColorFormatter().format(_record(logging.ERROR, "boom"))
    assert _plain(out) == "error: boom"


def test_warn_and_debug_prefixes():
    fmt = ColorFormatter()
    assert _plain(fmt.format(_record(logging.WARNING, "careful"))) == "warn: careful"
    assert _plain(fmt.format(_record(logging.DEBUG, "input"))) == "debug: input"


def test_init_routes_errors_to_stderr(capsys):
    logger = init()
    logger.error("bad thing")
    logger.info("good thing")
    captured = capsys.readouterr()
    assert _plain(captured.err) == "error: bad thing\n"
    assert captured.out == "good thing\n"


def test_init_is_idempotent(capsys):
    init()
    logger = init()
    logger.info("once")
    assert capsys.readouterr().out == "once\n"
    assert logger.level == logging.DEBUG