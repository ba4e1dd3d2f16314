"""Cart Store — atomic increments, floored decrements and concurrency.

Invariants:
    - cart[slot] >= 0 always; decrementing zero leaves zero
    - K increments and J decrements (K >= J) yield K - J regardless of interleaving
    - Concurrent increments for the same (user, slot) never lose an update
    - Out-of-range slots raise InvalidSlotError before touching the store
"""

import asyncio
import uuid

import pytest

from storefront.core.domain_types import CART_SLOTS, UserId
from storefront.core.errors import InvalidSlotError, ResourceNotFoundError
from storefront.services.cart_store import CartStore
from storefront.services.credential_store import CredentialStore


async def test_read_fresh_cart_all_zero(test_db, seed_user):
    cart = await CartStore(test_db).read(UserId(seed_user.id))
    assert len(cart) == CART_SLOTS
    assert all(q == 0 for q in cart.values())


async def test_increment_adds_one(test_db, seed_user):
    store = CartStore(test_db)
    uid = UserId(seed_user.id)
    assert await store.increment(uid, 5) == 1
    assert await store.increment(uid, 5) == 2
    cart = await store.read(uid)
    assert cart[5] == 2
    assert cart[6] == 0


async def test_decrement_floors_at_zero(test_db, seed_user):
    store = CartStore(test_db)
    uid = UserId(seed_user.id)
    assert await store.decrement(uid, 3) == 0
    await store.increment(uid, 3)
    assert await store.decrement(uid, 3) == 0
    assert await store.decrement(uid, 3) == 0
    assert (await store.read(uid))[3] == 0


@pytest.mark.parametrize("slot", [-1, CART_SLOTS])
async def test_invalid_slot_rejected(test_db, seed_user, slot):
    with pytest.raises(InvalidSlotError):
        await CartStore(test_db).increment(UserId(seed_user.id), slot)
    with pytest.raises(InvalidSlotError):
        await CartStore(test_db).decrement(UserId(seed_user.id), slot)


async def test_unknown_user_not_found(test_db):
    ghost = UserId(uuid.uuid4())
    with pytest.raises(ResourceNotFoundError):
        await CartStore(test_db).increment(ghost, 1)
    with pytest.raises(ResourceNotFoundError):
        await CartStore(test_db).read(ghost)


async def test_concurrent_increments_do_not_lose_updates(db_manager, seed_user):
    uid = UserId(seed_user.id)

    async def bump():
        async with db_manager.session() as db:
            await CartStore(db).increment(uid, 7)

    await asyncio.gather(*(bump() for _ in range(10)))

    async with db_manager.session() as db:
        assert (await CartStore(db).read(uid))[7] == 10


async def test_mixed_concurrent_mutations_net_out(db_manager, seed_user):
    uid = UserId(seed_user.id)
    async with db_manager.session() as db:
        for _ in range(4):
            await CartStore(db).increment(uid, 9)

    async def apply(action: str):
        async with db_manager.session() as db:
            await getattr(CartStore(db), action)(uid, 9)

    actions = ["increment"] * 6 + ["decrement"] * 3
    await asyncio.gather(*(apply(a) for a in actions))

    async with db_manager.session() as db:
        assert (await CartStore(db).read(uid))[9] == 4 + 6 - 3


async def test_carts_are_per_user(test_db, hasher, seed_user):
    bob = await CredentialStore(test_db, hasher).register("bob", "b@x.com", "pw2")
    store = CartStore(test_db)
    await store.increment(UserId(seed_user.id), 1)

    assert (await store.read(UserId(bob.id)))[1] == 0
