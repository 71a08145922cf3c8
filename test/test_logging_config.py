import logging

import pytest

from frametour.logging_config import setup_logging


@pytest.fixture
def logger():
    logger = logging.getLogger("frametour")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_console_handler_on_stderr(logger, capsys):
    setup_logging("INFO")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1

    logging.getLogger("frametour.lessons.io").info("Writing sales.csv")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "frametour.lessons.io - INFO - Writing sales.csv" in captured.err


def test_repeated_setup_replaces_handlers(logger, tmp_path):
    setup_logging(logging.DEBUG, log_file=tmp_path / "first.log")
    assert len(logger.handlers) == 2

    setup_logging(logging.WARNING)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)
    assert logger.level == logging.WARNING


def test_log_file(logger, tmp_path):
    log_file = tmp_path / "tour.log"
    setup_logging("debug", log_file=str(log_file))

    logging.getLogger("frametour.render").info("Rendering lesson basics")
    logging.getLogger("unrelated").warning("Not for us")
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in content
    assert "frametour.render - INFO - Rendering lesson basics" in content
    assert "Not for us" not in content


def test_level_filters_records(logger, capsys):
    setup_logging("WARNING")
    logging.getLogger("frametour.config").info("Hidden")
    logging.getLogger("frametour.config").warning("Shown")
    err = capsys.readouterr().err
    assert "Hidden" not in err
    assert "Shown" in err


def test_unknown_level(logger):
    with pytest.raises(ValueError, match="Unknown log level: BOGUS"):
        setup_logging("BOGUS")
