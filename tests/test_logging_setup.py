import json
import logging

import pytest

from simpleoneapi.logging_setup import LOGGER_NAME, init_log


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.mark.parametrize(
    "mode, level",
    [
        ("dev", logging.DEBUG),
        ("development", logging.DEBUG),
        ("prod", logging.WARNING),
        ("productionjson", logging.WARNING),
        ("", logging.WARNING),
        ("unknown", logging.WARNING),
    ],
)
def test_level_per_mode(mode, level):
    assert init_log(mode).level == level


def test_json_mode_writes_json_lines(capsys):
    logger = init_log("prodjson")
    logger.warning("disk low")
    entry = json.loads(capsys.readouterr().out.strip())
    assert entry["msg"] == "disk low"
    assert entry["level"] == "warn"
    assert "timestamp" in entry
    assert entry["caller"].startswith("test_logging_setup.py:")


def test_console_mode_writes_plain_text(capsys):
    logger = init_log("dev")
    logger.debug("hello there")
    out = capsys.readouterr().out
    assert "hello there" in out
    assert "DEBUG" in out
    with pytest.raises(json.JSONDecodeError):
        json.loads(out)


def test_prod_mode_suppresses_info(capsys):
    logger = init_log("prod")
    logger.info("hidden")
    assert capsys.readouterr().out == ""


def test_child_loggers_use_configuration(capsys):
    init_log("dev")
    logging.getLogger(LOGGER_NAME + ".config").info("from child")
    assert "from child" in capsys.readouterr().out


def test_repeated_init_keeps_one_handler():
    init_log("dev")
    logger = init_log("prod")
    assert len(logger.handlers) == 1