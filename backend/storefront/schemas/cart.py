"""Cart Schemas — cart mutation body.

Invariants:
    - itemId must be an integer; its range is checked by the cart store
"""

from pydantic import BaseModel, ConfigDict, Field


class CartItemRequest(BaseModel):
    """Body of POST /addtocart and POST /removefromCart."""
    model_config = ConfigDict(populate_by_name=True)

    item_id: int = Field(alias="itemId")
