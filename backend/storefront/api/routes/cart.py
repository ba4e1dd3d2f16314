"""Cart Routes — authenticated cart mutation and read.

Invariants:
    - Every route depends on get_current_user_id: no valid token, no cart access
    - Mutations answer plain text ("Added" / "Removed"), read answers the vector
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.dependencies import get_current_user_id
from storefront.core.cart_vector import cart_to_json
from storefront.core.domain_types import UserId
from storefront.infrastructure.database import get_db
from storefront.schemas.cart import CartItemRequest
from storefront.services.cart_store import CartStore

router = APIRouter(tags=["cart"])


@router.post("/addtocart", response_class=PlainTextResponse)
async def add_to_cart(
    body: CartItemRequest,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await CartStore(db).increment(user_id, body.item_id)
    return "Added"


@router.post("/removefromCart", response_class=PlainTextResponse)
async def remove_from_cart(
    body: CartItemRequest,
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    await CartStore(db).decrement(user_id, body.item_id)
    return "Removed"


@router.post("/getcart")
async def get_cart(
    user_id: UserId = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    cart = await CartStore(db).read(user_id)
    return cart_to_json(cart)
