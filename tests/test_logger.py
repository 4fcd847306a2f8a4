import logging

import pytest

from exact_kp.utils.logger import setup_logger


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler, logging.FileHandler) or type(handler) is logging.StreamHandler:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(saved_level)


def _configure(root, **kwargs):
    # pytest attaches its own capture handlers, which would make setup_logger a no-op
    root.handlers.clear()
    setup_logger(**kwargs)


def test_root_logger_uses_requested_level(root_logger, tmp_path):
    _configure(root_logger, run_name="run", log_dir=str(tmp_path), level="INFO")
    assert root_logger.level == logging.INFO
    assert not root_logger.isEnabledFor(logging.DEBUG)


def test_file_and_console_handlers_are_attached(root_logger, tmp_path):
    _configure(root_logger, run_name="run", log_dir=str(tmp_path), level=logging.DEBUG)
    kinds = {type(handler) for handler in root_logger.handlers}
    assert kinds == {logging.FileHandler, logging.StreamHandler}
    assert root_logger.level == logging.DEBUG
    assert len(list(tmp_path.glob("run_*.log"))) == 1


def test_second_call_does_not_add_handlers(root_logger, tmp_path):
    _configure(root_logger, run_name="run", log_dir=str(tmp_path))
    setup_logger(run_name="run", log_dir=str(tmp_path))
    assert len(root_logger.handlers) == 2
