"""aiohttp application factory for the timeline API."""

from typing import Optional

from aiohttp import web

from timeline.api.handlers import PostHandlers
from timeline.common import logger
from timeline.config.config import Config
from timeline.storage import PostStorage

STORAGE_KEY = web.AppKey("storage", PostStorage)


@web.middleware
async def log_requests(request: web.Request, handler) -> web.StreamResponse:
    try:
        response = await handler(request)
    except web.HTTPException as e:
        logger.info("%s %s -> %d", request.method, request.path, e.status)
        raise
    logger.info("%s %s -> %d", request.method, request.path, response.status)
    return response


async def storage_context(app: web.Application):
    """Open the storage on startup and close it on shutdown."""
    storage = app[STORAGE_KEY]
    await storage.open()
    yield
    logger.info("Shutting down, closing storage...")
    await storage.close()


def create_app(storage: PostStorage, static_dir: Optional[str] = None) -> web.Application:
    app = web.Application(middlewares=[log_requests])
    app[STORAGE_KEY] = storage
    app.cleanup_ctx.append(storage_context)

    handlers = PostHandlers(storage, static_dir or Config.STATIC_DIR)
    app.router.add_get("/api/posts", handlers.list_posts)
    app.router.add_post("/api/posts", handlers.create_post)
    app.router.add_get("/api/health", handlers.health)
    app.router.add_get("/", handlers.index)
    return app
