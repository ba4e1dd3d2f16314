"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Environment set before storefront.config is imported (get_settings is cached)
    - Every test gets a fresh SQLite database file with the full schema
    - bcrypt runs at minimum cost so suites stay fast

Design Decisions:
    - File database in tmp_path instead of :memory:, concurrent tests need
      independent connections that see the same data
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

import pytest  # noqa: E402

import storefront.models  # noqa: E402,F401
from storefront.db.base import Base  # noqa: E402
from storefront.infrastructure.database import DatabaseSessionManager  # noqa: E402
from storefront.infrastructure.password_hasher import PasswordHasher  # noqa: E402


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}",
        pool_size=5, max_overflow=20,
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)
