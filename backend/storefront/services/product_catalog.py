"""Product Catalog — sequential id assignment, removal and listing queries.

Invariants:
    - add() draws the next id from the product counter with one atomic
      UPDATE ... RETURNING inside the same transaction as the insert
    - Committed ids are exactly 1..N in creation order, never reused after removal
    - remove() is idempotent: removing an absent id is a no-op returning None
    - All listings are in insertion order (ascending id)

Design Decisions:
    - Counter row instead of max(id)+1: the row lock held by the UPDATE serializes
      concurrent adds, and a rolled-back add releases its id with the transaction
    - recent() reads newest-first with LIMIT then reverses, so only n rows load
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import CounterName, ProductId
from storefront.core.errors import ErrorContext, StoreUnavailableError
from storefront.models.catalog_counter import CatalogCounter
from storefront.models.product import Product
from storefront.schemas.product import ProductCreate

logger = logging.getLogger(__name__)


class ProductCatalog:
    """Catalog operations over one database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, data: ProductCreate) -> Product:
        """Assign the next id and persist the product."""
        product_id = await self._next_id()
        product = Product(
            id=product_id,
            name=data.name,
            image=data.image,
            category=data.category,
            new_price=data.new_price,
            old_price=data.old_price,
        )
        self.db.add(product)
        await self.db.commit()
        logger.info(
            f"Product '{product.name}' saved",
            extra={"product_id": product.id},
        )
        return product

    async def _next_id(self) -> ProductId:
        result = await self.db.execute(
            update(CatalogCounter)
            .where(CatalogCounter.name == CounterName.PRODUCT.value)
            .values(value=CatalogCounter.value + 1)
            .returning(CatalogCounter.value)
            .execution_options(synchronize_session=False),
        )
        value = result.scalar_one_or_none()
        if value is None:
            raise StoreUnavailableError(
                "product counter row missing", "assign_id",
                ErrorContext(debug_info={"counter": CounterName.PRODUCT.value}),
            )
        return ProductId(value)

    async def get(self, product_id: int) -> Product | None:
        result = await self.db.execute(
            select(Product).where(Product.id == product_id),
        )
        return result.scalar_one_or_none()

    async def remove(self, product_id: int) -> Product | None:
        """Delete the product if present. Returns the removed record or None."""
        product = await self.get(product_id)
        if product is None:
            logger.info(
                "Remove skipped, product absent",
                extra={"product_id": product_id},
            )
            return None
        await self.db.execute(delete(Product).where(Product.id == product_id))
        await self.db.commit()
        logger.info("Product removed", extra={"product_id": product_id})
        return product

    async def list_all(self) -> list[Product]:
        result = await self.db.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())

    async def recent(self, n: int) -> list[Product]:
        """Last n products by insertion order, oldest first."""
        if n <= 0:
            return []
        result = await self.db.execute(
            select(Product).order_by(Product.id.desc()).limit(n),
        )
        return list(reversed(result.scalars().all()))

    async def filter_by_category(
        self, category: str, limit: int,
    ) -> list[Product]:
        """First `limit` products in `category`, insertion order."""
        if limit <= 0:
            return []
        result = await self.db.execute(
            select(Product)
            .where(Product.category == category)
            .order_by(Product.id)
            .limit(limit),
        )
        return list(result.scalars().all())
