"""Product Routes — catalog writes and the storefront listing views.

Invariants:
    - No authentication on catalog routes
    - /removeproduct succeeds whether or not the id exists
    - /newcollections = last NEW_COLLECTION_SIZE products, oldest first
    - /popularinwomen = first POPULAR_SIZE products in POPULAR_CATEGORY
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import (
    NEW_COLLECTION_SIZE, POPULAR_CATEGORY, POPULAR_SIZE,
)
from storefront.infrastructure.database import get_db
from storefront.schemas.product import (
    ProductCreate, ProductMutationResponse, ProductRemove, ProductResponse,
)
from storefront.services.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)
router = APIRouter(tags=["products"])


@router.post("/addproduct", response_model=ProductMutationResponse)
async def add_product(body: ProductCreate, db: AsyncSession = Depends(get_db)):
    product = await ProductCatalog(db).add(body)
    return ProductMutationResponse(name=product.name)


@router.post("/removeproduct", response_model=ProductMutationResponse)
async def remove_product(body: ProductRemove, db: AsyncSession = Depends(get_db)):
    """Remove by id; echoes the request name when nothing was removed."""
    removed = await ProductCatalog(db).remove(body.id)
    return ProductMutationResponse(name=removed.name if removed else body.name)


@router.get("/allproducts", response_model=list[ProductResponse])
async def all_products(db: AsyncSession = Depends(get_db)):
    products = await ProductCatalog(db).list_all()
    logger.info(f"All products fetched ({len(products)})")
    return products


@router.get("/newcollections", response_model=list[ProductResponse])
async def new_collections(db: AsyncSession = Depends(get_db)):
    return await ProductCatalog(db).recent(NEW_COLLECTION_SIZE)


@router.get("/popularinwomen", response_model=list[ProductResponse])
async def popular_in_women(db: AsyncSession = Depends(get_db)):
    return await ProductCatalog(db).filter_by_category(
        POPULAR_CATEGORY, POPULAR_SIZE,
    )
