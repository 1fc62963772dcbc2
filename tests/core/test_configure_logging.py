# tests/core/test_configure_logging.py
import logging

import pytest

from html_spellchecker.utils.configure_logging import LogWithTqdm, configure_logger


@pytest.fixture
def restore_logging():
    """Puts the root logger and touched module loggers back after the test."""
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    touched = ["html_spellchecker.dom", "noisy.lib"]
    saved_levels = {name: logging.getLogger(name).level for name in touched}
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)


def test_configure_logger_installs_tqdm_handler(restore_logging):
    configure_logger(
        "info",
        module_specific_levels={"html_spellchecker.dom": "DEBUG"},
        silenced_loggers={"noisy.lib": None},
    )
    root = logging.getLogger()

    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], LogWithTqdm)
    assert logging.getLogger("html_spellchecker.dom").level == logging.DEBUG
    assert logging.getLogger("noisy.lib").level == logging.CRITICAL


def test_unknown_level_names_fall_back(restore_logging):
    configure_logger("LOUD")
    assert logging.getLogger().level == logging.WARNING


def test_handler_writes_through_tqdm(restore_logging, capsys):
    configure_logger("INFO")
    logging.getLogger("html_spellchecker.test").info("hello %s", "there")
    assert "hello there" in capsys.readouterr().err
