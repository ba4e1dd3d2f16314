"""Service test fixtures — seeded users and product payloads.

Invariants:
    - seed_user goes through CredentialStore.register, so its cart is fully initialized
"""

import pytest

from storefront.schemas.product import ProductCreate
from storefront.services.credential_store import CredentialStore


@pytest.fixture
def make_product():
    """Factory for valid ProductCreate payloads."""
    def _make(name: str = "Striped Blouse", category: str = "women") -> ProductCreate:
        return ProductCreate(
            name=name,
            image="http://localhost:4000/images/product_1.png",
            category=category,
            new_price=50.0,
            old_price=80.5,
        )
    return _make


@pytest.fixture
async def seed_user(test_db, hasher):
    store = CredentialStore(test_db, hasher)
    return await store.register("alice", "a@x.com", "pw1")
