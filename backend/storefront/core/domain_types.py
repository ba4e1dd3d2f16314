"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps UUID, ProductId and SlotIndex wrap int
    - CART_SLOTS is the fixed cart domain size, independent of catalog size
    - Counter names encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Cart kept as a fixed 300-slot vector for client compatibility; a slot index
      may reference no existing product
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ProductId = NewType("ProductId", int)
SlotIndex = NewType("SlotIndex", int)


# ─── Cart Domain ─────────────────────────────────────────────────

CART_SLOTS = 300


# ─── Catalog Views ───────────────────────────────────────────────

NEW_COLLECTION_SIZE = 8
POPULAR_CATEGORY = "women"
POPULAR_SIZE = 4


# ─── Enums ───────────────────────────────────────────────────────

class CounterName(str, Enum):
    """Rows in the catalog_counters table."""
    PRODUCT = "product"
