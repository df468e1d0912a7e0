"""Main entry point for the timeline server."""

import sys

from aiohttp import web

from timeline.api import create_app
from timeline.common import StorageFault, logger
from timeline.config.config import Config
from timeline.storage import PostStorage


def log_banner() -> None:
    logger.info("Server starting: http://localhost:%d", Config.PORT)
    logger.info("Database: %s", Config.DB_PATH)
    logger.info("API endpoints:")
    logger.info("   GET  /api/posts  - list posts")
    logger.info("   POST /api/posts  - create post")
    logger.info("   GET  /api/health - health check")


def main() -> None:
    """Run the server until SIGINT or SIGTERM."""
    storage = PostStorage(db_path=Config.DB_PATH)
    app = create_app(storage)
    log_banner()
    try:
        web.run_app(app, host=Config.HOST, port=Config.PORT, print=None)
    except StorageFault as e:
        logger.critical("Fatal storage error: %s", e, exc_info=True)
        sys.exit(1)
    logger.info("Server stopped")


if __name__ == "__main__":
    main()
