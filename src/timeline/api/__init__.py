from .app import STORAGE_KEY, create_app
from .handlers import PostHandlers

__all__ = ["PostHandlers", "STORAGE_KEY", "create_app"]
