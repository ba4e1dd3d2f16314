"""Request schemas — explicit required fields and value bounds per endpoint.

Invariants:
    - ProductCreate text fields non-empty after strip, prices >= 0
    - CartItemRequest reads the itemId alias
    - SignupRequest rejects malformed email shapes
"""

import pytest
from pydantic import ValidationError

from storefront.schemas.auth import LoginRequest, SignupRequest
from storefront.schemas.cart import CartItemRequest
from storefront.schemas.product import ProductCreate, ProductRemove


def _product(**overrides) -> dict:
    return {
        "name": "Striped Blouse", "image": "img.png", "category": "women",
        "new_price": 50, "old_price": 80, **overrides,
    }


def test_product_create_strips_text():
    product = ProductCreate(**_product(name="  Blouse  "))
    assert product.name == "Blouse"


def test_product_create_rejects_blank_name():
    with pytest.raises(ValidationError):
        ProductCreate(**_product(name="   "))


def test_product_create_rejects_negative_price():
    with pytest.raises(ValidationError):
        ProductCreate(**_product(old_price=-0.01))


@pytest.mark.parametrize("field", ["name", "image", "category", "new_price", "old_price"])
def test_product_create_requires_every_field(field):
    payload = _product()
    del payload[field]
    with pytest.raises(ValidationError):
        ProductCreate(**payload)


def test_product_remove_requires_positive_id():
    with pytest.raises(ValidationError):
        ProductRemove(id=0)
    assert ProductRemove(id=3).name is None


def test_cart_item_reads_alias():
    assert CartItemRequest.model_validate({"itemId": 12}).item_id == 12


def test_cart_item_rejects_non_integer():
    with pytest.raises(ValidationError):
        CartItemRequest.model_validate({"itemId": "twelve"})


@pytest.mark.parametrize("email", ["plain", "a@b", "a b@x.com"])
def test_signup_rejects_bad_email(email):
    with pytest.raises(ValidationError):
        SignupRequest(username="alice", email=email, password="pw1")


def test_login_requires_password():
    with pytest.raises(ValidationError):
        LoginRequest(email="a@x.com", password="")
