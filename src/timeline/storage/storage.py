"""SQLite storage for timeline posts."""

import sqlite3
from typing import List, Optional

import aiosqlite

from timeline.common import logger
from timeline.common.constants import MAX_POSTS
from timeline.common.exceptions import StorageFault
from timeline.models import Post

SCHEMA = """
CREATE TABLE IF NOT EXISTS posts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    author TEXT NOT NULL,
    content TEXT NOT NULL,
    timestamp TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS idx_timestamp ON posts(timestamp DESC);
CREATE INDEX IF NOT EXISTS idx_author ON posts(author);
"""

SELECT_RECENT = """
SELECT author, content, timestamp
FROM posts
ORDER BY timestamp DESC
LIMIT ?
"""

INSERT_POST = "INSERT INTO posts (author, content, timestamp) VALUES (?, ?, ?)"


class PostStorage:
    """Append-only store of posts backed by a single SQLite file."""

    def __init__(self, db_path: str = "timeline.db"):
        self.db_path = db_path
        self._db: Optional[aiosqlite.Connection] = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @property
    def is_open(self) -> bool:
        return self._db is not None

    async def open(self) -> None:
        """Connect to the database and make sure the schema exists."""
        if self._db is not None:
            return
        try:
            self._db = await aiosqlite.connect(self.db_path)
            self._db.row_factory = aiosqlite.Row
        except sqlite3.Error as e:
            raise StorageFault(f"Cannot open database {self.db_path}") from e
        logger.info("Opened database %s", self.db_path)
        try:
            await self.init_schema()
        except StorageFault:
            await self.close()
            raise

    async def init_schema(self) -> None:
        """Create the posts table and its indexes if they are missing."""
        db = self._connection()
        try:
            await db.executescript(SCHEMA)
            await db.commit()
        except sqlite3.Error as e:
            raise StorageFault("Schema initialization failed") from e
        logger.debug("Schema ready in %s", self.db_path)

    async def list_recent(self) -> List[Post]:
        """Return up to MAX_POSTS posts, newest timestamp first."""
        db = self._connection()
        try:
            async with db.execute(SELECT_RECENT, (MAX_POSTS,)) as cursor:
                rows = await cursor.fetchall()
        except sqlite3.Error as e:
            raise StorageFault("Failed to list posts") from e
        return [Post(**dict(row)) for row in rows]

    async def create_post(self, author: str, content: str, timestamp: str) -> int:
        """Insert a post and return its id."""
        db = self._connection()
        try:
            cursor = await db.execute(INSERT_POST, (author, content, timestamp))
            await db.commit()
        except (sqlite3.Error, UnicodeError) as e:
            raise StorageFault("Failed to insert post") from e
        logger.debug("Inserted post %d by %s", cursor.lastrowid, author)
        return cursor.lastrowid

    async def close(self) -> None:
        """Close the database connection."""
        if self._db is None:
            return
        try:
            await self._db.close()
        except sqlite3.Error as e:
            logger.error("Error closing database: %s", e, exc_info=True)
        finally:
            self._db = None
        logger.info("Closed database %s", self.db_path)

    def _connection(self) -> aiosqlite.Connection:
        if self._db is None:
            raise StorageFault("Storage is not open")
        return self._db
