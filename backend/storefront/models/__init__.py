"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User owns its cart rows; products are independent of users

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from storefront.models.catalog_counter import CatalogCounter  # noqa: F401
from storefront.models.product import Product  # noqa: F401
from storefront.models.user import User  # noqa: F401
from storefront.models.cart_slot import CartSlot  # noqa: F401
