import pytest
import pytest_asyncio

from timeline.api import create_app
from timeline.storage import PostStorage


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "timeline.db")


@pytest_asyncio.fixture
async def storage(db_path):
    async with PostStorage(db_path) as storage:
        yield storage


@pytest.fixture
def static_dir(tmp_path):
    directory = tmp_path / "static"
    directory.mkdir()
    (directory / "index.html").write_text("<h1>Timeline</h1>", encoding="utf-8")
    return str(directory)


@pytest_asyncio.fixture
async def client(aiohttp_client, db_path, static_dir):
    app = create_app(PostStorage(db_path), static_dir=static_dir)
    return await aiohttp_client(app)
