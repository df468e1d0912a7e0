import logging

from timeline.common import Logger, logger
from timeline.common.constants import TIMELINE_STR
from timeline.config import Config


def test_logger_is_singleton():
    assert Logger() is logger
    assert Logger().logger is logging.getLogger(TIMELINE_STR)


def test_logger_has_single_stdout_handler():
    Logger()
    Logger()
    # pytest adds its own capture handlers; only count ours
    own = [h for h in logger.logger.handlers if type(h) is logging.StreamHandler]
    assert len(own) == 1
    assert logger.logger.propagate is False


def test_default_config():
    assert isinstance(Config.PORT, int)
    assert Config.STATIC_DIR.endswith("static")
