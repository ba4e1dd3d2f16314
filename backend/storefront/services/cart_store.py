"""Cart Store — per-user quantity vector with atomic slot mutations.

Invariants:
    - Slot index validated against the fixed cart domain before any IO
    - increment/decrement are single UPDATE statements on one (user, slot) row:
      concurrent requests compose, none is lost
    - decrement floors at zero against the value at the moment it is applied
    - read returns every slot of the vector

Design Decisions:
    - Atomic field update over read-modify-write of the whole cart: the store's
      row lock linearizes mutations per (user, slot) without an app-level lock
"""

import logging

from sqlalchemy import case, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.cart_vector import build_cart_vector, check_slot
from storefront.core.domain_types import UserId
from storefront.core.errors import ResourceNotFoundError
from storefront.models.cart_slot import CartSlot

logger = logging.getLogger(__name__)


class CartStore:
    """Cart mutations for authenticated users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def increment(self, user_id: UserId, slot: int) -> int:
        """Add one to the slot. Returns the new quantity."""
        return await self._apply(
            user_id, slot, CartSlot.quantity + 1, "increment",
        )

    async def decrement(self, user_id: UserId, slot: int) -> int:
        """Subtract one from the slot, never below zero. Returns the new quantity."""
        return await self._apply(
            user_id, slot,
            case((CartSlot.quantity > 0, CartSlot.quantity - 1), else_=0),
            "decrement",
        )

    async def read(self, user_id: UserId) -> dict[int, int]:
        result = await self.db.execute(
            select(CartSlot.slot, CartSlot.quantity)
            .where(CartSlot.user_id == user_id)
            .order_by(CartSlot.slot),
        )
        rows = result.all()
        if not rows:
            raise ResourceNotFoundError("User", str(user_id))
        return build_cart_vector((row.slot, row.quantity) for row in rows)

    async def _apply(self, user_id: UserId, slot: int, new_value, action: str) -> int:
        index = check_slot(slot)
        result = await self.db.execute(
            update(CartSlot)
            .where(CartSlot.user_id == user_id, CartSlot.slot == index)
            .values(quantity=new_value)
            .returning(CartSlot.quantity)
            .execution_options(synchronize_session=False),
        )
        quantity = result.scalar_one_or_none()
        if quantity is None:
            await self.db.rollback()
            raise ResourceNotFoundError("User", str(user_id))
        await self.db.commit()
        logger.info(
            f"Cart {action}",
            extra={"user_id": user_id, "slot": index, "quantity": quantity},
        )
        return quantity
