"""Product Schemas — catalog request bodies and the public product shape.

Invariants:
    - ProductCreate: name, image, category non-empty (stripped); prices >= 0
    - ProductRemove.id >= 1 (catalog ids start at 1)
    - ProductResponse keys match what storefront clients render
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductCreate(BaseModel):
    """Body of POST /addproduct."""
    name: str = Field(min_length=1, max_length=255)
    image: str = Field(min_length=1, max_length=1024)
    category: str = Field(min_length=1, max_length=100)
    new_price: float = Field(ge=0)
    old_price: float = Field(ge=0)

    @field_validator("name", "image", "category")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v


class ProductRemove(BaseModel):
    """Body of POST /removeproduct."""
    id: int = Field(ge=1)
    name: str | None = None


class ProductResponse(BaseModel):
    """Public product record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    image: str
    category: str
    new_price: float
    old_price: float
    date: datetime
    available: bool


class ProductMutationResponse(BaseModel):
    success: bool = True
    name: str | None = None
