"""
Business logic for orders.

Orders are the only records that point at other records: each one
carries a ``userId`` and a ``productId``.  The references are stored
as identifiers and resolved on read with an explicit second round of
lookups against the ``users`` and ``products`` collections.

Failures are sorted into three outcomes for the endpoints:

* invalid input -> ``ValidationError`` (nothing is persisted)
* unknown order id -> ``None``
* anything else (store fault, timeout) -> ``InternalError``
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaValidationError

from ..core.config import settings
from ..core.db import DocumentStore
from ..core.exceptions import InternalError, StoreError, ValidationError
from ..schemas.order import OrderCreate, OrderDetail, OrderRead
from ..schemas.product import ProductRead
from ..schemas.user import UserRead

logger = logging.getLogger(__name__)


class OrderService:
    """Service for creating orders and reading them with resolved references.

    The service keeps no state between calls; it only holds the store it
    was constructed with and the reference-checking policy.
    """

    collection = "orders"

    def __init__(self, store: DocumentStore, validate_references: Optional[bool] = None):
        self.store = store
        if validate_references is None:
            validate_references = settings.validate_references
        self.validate_references = validate_references

    async def create_order(self, payload: Any) -> OrderRead:
        """Validate ``payload`` and persist it as a new order.

        ``payload`` is the raw request body.  It must be a mapping with
        non-empty string ``userId`` and ``productId``; other keys are
        stored as given.  Raises ``ValidationError`` when the body is
        rejected and ``InternalError`` when the store fails.
        """
        try:
            order = OrderCreate.model_validate(payload)
        except SchemaValidationError as exc:
            logger.info("Rejected order payload: %d validation error(s)", exc.error_count())
            raise ValidationError(json.loads(exc.json(include_url=False))) from exc

        if self.validate_references:
            await self._check_references(order)

        try:
            stored = await self.store.insert(self.collection, order.model_dump(by_alias=True))
        except StoreError as exc:
            logger.exception("Failed to persist order for user %s", order.user_id)
            raise InternalError(exc) from exc

        logger.info(
            "Created order %s (user %s, product %s)",
            stored["id"],
            order.user_id,
            order.product_id,
        )
        return OrderRead.model_validate(stored)

    async def get_order(self, order_id: str) -> Optional[OrderDetail]:
        """Fetch an order and resolve its user and product references.

        Returns ``None`` when no order has ``order_id``.  A reference
        whose target is missing resolves to ``None`` and is logged.
        """
        try:
            order = await self.store.find_by_id(self.collection, order_id)
            if order is None:
                return None
            user, product = await asyncio.gather(
                self.store.find_by_id("users", order.get("userId")),
                self.store.find_by_id("products", order.get("productId")),
            )
            detail = dict(order)
            detail["userId"] = self._resolve(order_id, "userId", order, user, UserRead)
            detail["productId"] = self._resolve(order_id, "productId", order, product, ProductRead)
            return OrderDetail.model_validate(detail)
        except (StoreError, SchemaValidationError) as exc:
            logger.exception("Failed to load order %s", order_id)
            raise InternalError(exc) from exc

    @staticmethod
    def _resolve(order_id: str, field: str, order: Dict[str, Any], record: Optional[Dict[str, Any]], model):
        if record is None:
            logger.warning(
                "Order %s references missing %s %s", order_id, field, order.get(field)
            )
            return None
        return model.model_validate(record)

    async def _check_references(self, order: OrderCreate) -> None:
        try:
            user, product = await asyncio.gather(
                self.store.find_by_id("users", order.user_id),
                self.store.find_by_id("products", order.product_id),
            )
        except StoreError as exc:
            logger.exception("Failed to check order references")
            raise InternalError(exc) from exc

        errors: List[Dict[str, Any]] = []
        if user is None:
            errors.append(_missing_reference("userId", "User", order.user_id))
        if product is None:
            errors.append(_missing_reference("productId", "Product", order.product_id))
        if errors:
            logger.info("Rejected order with unknown references: %s", errors)
            raise ValidationError(errors)


def _missing_reference(field: str, kind: str, value: str) -> Dict[str, Any]:
    return {
        "type": "reference_not_found",
        "loc": [field],
        "msg": f"{kind} {value} does not exist",
        "input": value,
    }
