"""Cart Vector — pure rules for the fixed-size per-user quantity vector.

Invariants:
    - Valid slots are exactly 0..CART_SLOTS-1
    - A vector always holds every slot, quantities never negative
    - Decrement floors at zero against the current value

Design Decisions:
    - Pure functions: the cart store applies the same arithmetic inside SQL,
      these helpers define it once for validation and serialization
"""

from collections.abc import Iterable

from storefront.core.domain_types import CART_SLOTS, SlotIndex
from storefront.core.errors import InvalidSlotError


def check_slot(slot: int) -> SlotIndex:
    """Return slot as SlotIndex or raise InvalidSlotError."""
    if isinstance(slot, bool) or not 0 <= slot < CART_SLOTS:
        raise InvalidSlotError(slot, CART_SLOTS)
    return SlotIndex(slot)


def empty_cart() -> dict[int, int]:
    return {slot: 0 for slot in range(CART_SLOTS)}


def floored_decrement(quantity: int) -> int:
    return quantity - 1 if quantity > 0 else 0


def build_cart_vector(rows: Iterable[tuple[int, int]]) -> dict[int, int]:
    """Overlay stored (slot, quantity) rows on an all-zero vector."""
    cart = empty_cart()
    for slot, quantity in rows:
        if 0 <= slot < CART_SLOTS:
            cart[slot] = max(quantity, 0)
    return cart


def cart_to_json(cart: dict[int, int]) -> dict[str, int]:
    """Serialize with string keys, the shape clients have always received."""
    return {str(slot): quantity for slot, quantity in sorted(cart.items())}
