"""Logging setup is safe to run on every app start."""

import logging

import pytest

from photofeed.core.logging import HANDLER_NAME, setup_logging


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _photofeed_handlers():
    return [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]


def test_setup_logging_twice_installs_one_handler(restore_root_logger):
    setup_logging("INFO")
    setup_logging("DEBUG")

    assert len(_photofeed_handlers()) == 1
    assert logging.root.level == logging.DEBUG


def test_setup_logging_unknown_level_falls_back_to_info(restore_root_logger):
    setup_logging("chatty")
    assert logging.root.level == logging.INFO
