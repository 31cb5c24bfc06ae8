"""Health probes and application startup."""

from bookstore.config import Settings
from bookstore.main import create_app


async def test_liveness(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_catalog(client, bible):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"catalog": "healthy", "books": 1}}


async def test_readiness_without_catalog(client, data_file):
    data_file.unlink()
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "storage_io_error"}


async def test_lifespan_creates_missing_catalog(tmp_path):
    path = tmp_path / "data" / "books.json"
    app = create_app(Settings(data_file=path, create_missing_data_file=True))
    async with app.router.lifespan_context(app):
        assert path.read_text(encoding="utf-8") == "[]"


async def test_lifespan_leaves_missing_catalog_when_disabled(tmp_path):
    path = tmp_path / "books.json"
    app = create_app(Settings(data_file=path, create_missing_data_file=False))
    async with app.router.lifespan_context(app):
        assert not path.exists()
