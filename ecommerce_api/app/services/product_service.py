"""
Business logic for products.
"""

import logging
from typing import Optional

from ..core.db import DocumentStore
from ..core.exceptions import InternalError, StoreError
from ..schemas.product import ProductCreate, ProductRead

logger = logging.getLogger(__name__)


class ProductService:
    """Service for product records, bound to one document store."""

    collection = "products"

    def __init__(self, store: DocumentStore):
        self.store = store

    async def create_product(self, data: ProductCreate) -> ProductRead:
        logger.info("Adding product %s", data.name)
        try:
            stored = await self.store.insert(self.collection, data.model_dump())
        except StoreError as exc:
            logger.exception("Failed to store product %s", data.name)
            raise InternalError(exc) from exc
        return ProductRead.model_validate(stored)

    async def get_product(self, product_id: str) -> Optional[ProductRead]:
        try:
            row = await self.store.find_by_id(self.collection, product_id)
        except StoreError as exc:
            logger.exception("Failed to load product %s", product_id)
            raise InternalError(exc) from exc
        if row:
            return ProductRead.model_validate(row)
        return None
