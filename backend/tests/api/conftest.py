"""API test fixtures: a fresh catalog file and app per test.

Invariants:
    - Every test gets its own catalog file in tmp_path, seeded with []
    - The app is driven in-process through httpx ASGITransport (no lifespan, no server)
"""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from bookstore.config import Settings
from bookstore.main import create_app


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "books.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture
def app(data_file):
    return create_app(Settings(data_file=data_file, create_missing_data_file=False))


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def stored(data_file):
    """Read the catalog file as plain JSON."""
    return lambda: json.loads(data_file.read_text(encoding="utf-8"))


@pytest.fixture
async def bible(client):
    res = await client.post("/books", json={"title": "Bible", "desc": "guide"})
    assert res.status_code == 201
    return res.json()
