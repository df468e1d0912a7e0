"""Request handlers for the timeline HTTP API."""

import json
from datetime import datetime, timezone
from pathlib import Path

import aiofiles
from aiohttp import web

from timeline.common import logger
from timeline.common.constants import (
    CREATE_FAILED_MSG,
    CREATE_SUCCESS_MSG,
    FETCH_FAILED_MSG,
    INVALID_JSON_MSG,
)
from timeline.common.exceptions import StorageFault, ValidationFault
from timeline.models import NewPost
from timeline.storage import PostStorage


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def error_response(status: int, message: str) -> web.Response:
    return web.json_response({"error": message}, status=status)


class PostHandlers:
    """HTTP handlers bound to a post storage."""

    def __init__(self, storage: PostStorage, static_dir: str):
        self.storage = storage
        self.static_dir = Path(static_dir)

    async def list_posts(self, request: web.Request) -> web.Response:
        try:
            posts = await self.storage.list_recent()
        except StorageFault as e:
            logger.error("Error fetching posts: %s", e, exc_info=True)
            return error_response(500, FETCH_FAILED_MSG)
        return web.json_response({"posts": [post.model_dump() for post in posts]})

    async def create_post(self, request: web.Request) -> web.Response:
        try:
            body = await request.text()
            payload = json.loads(body) if body.strip() else {}
        except ValueError:
            return error_response(400, INVALID_JSON_MSG)

        try:
            post = NewPost.from_payload(payload)
        except ValidationFault as e:
            logger.info("Rejected post: %s", e)
            return error_response(400, str(e))

        try:
            post_id = await self.storage.create_post(post.author, post.content, post.timestamp)
        except StorageFault as e:
            logger.error("Error creating post: %s", e, exc_info=True)
            return error_response(500, CREATE_FAILED_MSG)

        logger.info("Created post %d by %s", post_id, post.author)
        return web.json_response({"success": True, "id": post_id, "message": CREATE_SUCCESS_MSG})

    async def health(self, request: web.Request) -> web.Response:
        return web.json_response({"status": "OK", "timestamp": utc_now_iso()})

    async def index(self, request: web.Request) -> web.Response:
        """Serve the landing page."""
        path = self.static_dir / "index.html"
        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                body = await f.read()
        except FileNotFoundError:
            logger.warning("Landing page not found at %s", path)
            raise web.HTTPNotFound()
        return web.Response(text=body, content_type="text/html")
