"""User ORM — credential records; owns the embedded cart vector rows.

Invariants:
    - id is UUID primary key assigned by the store
    - email is unique across all users (unique index)
    - password_hash is a bcrypt string, never the plaintext

Design Decisions:
    - cascade delete for cart_slots: the user record owns its cart lifecycle
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.db.base import Base


class User(Base):
    """Registered shopper."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    cart_slots: Mapped[list["CartSlot"]] = relationship(
        "CartSlot", back_populates="user",
        cascade="all, delete-orphan", lazy="noload",
    )
