"""Product ORM — catalog entries with catalog-assigned sequential ids.

Invariants:
    - id is assigned by ProductCatalog from the product counter, never autoincrement
    - ids strictly increase in creation order and are never reused
    - available defaults to True

Design Decisions:
    - Column names follow the JSON keys clients already consume
      (image, new_price, old_price, date)
    - category indexed: category slices are the hot read path
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base


class Product(Base):
    """Catalog product."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[str] = mapped_column(String(1024), nullable=False)
    category: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True,
    )
    new_price: Mapped[float] = mapped_column(Float, nullable=False)
    old_price: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    available: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
