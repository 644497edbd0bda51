import logging
import pathlib
import sys

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from wheelstack.logging_config import resolve_level, setup_logging


def test_setup_is_repeatable_and_writes_file(tmp_path):
    log_file = tmp_path / "wheels.log"
    logger = logging.getLogger("wheelstack")
    try:
        setup_logging(logging.INFO)
        setup_logging("debug", log_file=str(log_file))
        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG

        logging.getLogger("wheelstack.tables").warning("division count must be at least 1")
        for handler in logger.handlers:
            handler.flush()
        assert "wheelstack.tables - WARNING - division count" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_resolve_level_names_and_numbers():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" Warning ") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        resolve_level("chatty")
