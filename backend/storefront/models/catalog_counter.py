"""Catalog Counter ORM — named monotonically increasing counters for id assignment.

Invariants:
    - One row per CounterName; the product row exists as soon as the table does
    - value only ever grows (UPDATE value = value + 1), never decremented

Design Decisions:
    - Counter row incremented inside the same transaction as the product insert:
      the row lock serializes concurrent adds, a rollback also rolls back the
      increment, so committed ids have no gaps
    - Seeded by an after_create DDL hook so metadata.create_all (tests) and the
      alembic migration produce the same starting state
"""

from sqlalchemy import DDL, Integer, String, event
from sqlalchemy.orm import Mapped, mapped_column

from storefront.core.domain_types import CounterName
from storefront.db.base import Base


class CatalogCounter(Base):
    """Named counter row."""
    __tablename__ = "catalog_counters"

    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    value: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


event.listen(
    CatalogCounter.__table__,
    "after_create",
    DDL(
        "INSERT INTO catalog_counters (name, value) "
        f"VALUES ('{CounterName.PRODUCT.value}', 0)"
    ),
)
