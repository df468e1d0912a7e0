"""Common utilities: logging, constants and exceptions."""

from .exceptions import StorageFault, TimelineError, ValidationFault
from .logger import Logger

logger = Logger()

__all__ = ["Logger", "StorageFault", "TimelineError", "ValidationFault", "logger"]
