"""Cart Slot ORM — one quantity per (user, slot) of the fixed cart vector.

Invariants:
    - Composite primary key (user_id, slot): exactly one row per slot
    - quantity >= 0 (CHECK constraint)
    - All CART_SLOTS rows created at signup

Design Decisions:
    - Row per slot instead of a JSON column: increments become single-row
      atomic UPDATEs, so concurrent requests cannot lose updates
"""

import uuid

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.db.base import Base


class CartSlot(Base):
    """Quantity held in one cart slot."""
    __tablename__ = "cart_slots"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_cart_slots_quantity_non_negative"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True,
    )
    slot: Mapped[int] = mapped_column(Integer, primary_key=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    user: Mapped["User"] = relationship("User", back_populates="cart_slots")
