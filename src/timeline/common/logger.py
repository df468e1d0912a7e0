"""
Provide logging configuration.
"""

import logging
import sys

from timeline.common.constants import TIMELINE_STR
from timeline.common.singleton import Singleton
from timeline.config.config import Config

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(filename)s:%(lineno)d -> %(message)s"


class Logger(metaclass=Singleton):
    log_level_str = Config.LOG_LEVEL

    def __init__(self):
        self.logger = logging.getLogger(TIMELINE_STR)
        self.logger.propagate = False
        self.logger.setLevel(logging.getLevelName(self.log_level_str.upper()))

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

    def debug(self, msg, *args, **kwargs):
        self.logger.debug(msg, *args, stacklevel=2, **kwargs)

    def info(self, msg, *args, **kwargs):
        self.logger.info(msg, *args, stacklevel=2, **kwargs)

    def warning(self, msg, *args, **kwargs):
        self.logger.warning(msg, *args, stacklevel=2, **kwargs)

    def error(self, msg, *args, **kwargs):
        self.logger.error(msg, *args, stacklevel=2, **kwargs)

    def critical(self, msg, *args, **kwargs):
        self.logger.critical(msg, *args, stacklevel=2, **kwargs)
