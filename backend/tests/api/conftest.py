"""API test fixtures — fresh FastAPI app with an injected store handle.

Invariants:
    - app.state.db points at the per-test SQLite database (lifespan is not run)
    - dependency_overrides are local to the per-test app
"""

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.main import create_app


@pytest.fixture
def app(db_manager):
    application = create_app()
    application.state.db = db_manager
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def signup_token(client):
    """Register alice and return her signup token."""
    res = await client.post("/signup", json={
        "username": "alice", "email": "a@x.com", "password": "pw1",
    })
    assert res.status_code == 200
    return res.json()["token"]


@pytest.fixture
def product_payload():
    return {
        "name": "Striped Blouse",
        "image": "http://localhost:4000/images/product_1.png",
        "category": "women",
        "new_price": 50.0,
        "old_price": 80.5,
    }
