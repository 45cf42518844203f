"""
Order endpoints for API v1.

``POST /orders`` stores a new order and ``GET /orders/{order_id}``
returns it with the user and product references resolved.  The body of
``POST /orders`` is read as raw JSON and validated by ``OrderService``,
so every rejected order (unparseable JSON included) is answered with
400 and the validation errors rather than FastAPI's 422.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from ecommerce_api.app.core.db import DocumentStore, get_store
from ecommerce_api.app.core.exceptions import InternalError, ValidationError
from ecommerce_api.app.schemas.order import OrderDetail, OrderRead
from ecommerce_api.app.services.order_service import OrderService


router = APIRouter()


async def _read_json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise ValidationError(
            [{"type": "json_invalid", "loc": ["body"], "msg": f"JSON decode error: {e}", "input": None}]
        ) from e


@router.post("", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: Request,
    store: DocumentStore = Depends(get_store),
) -> OrderRead:
    """Create an order.

    The body must contain ``userId`` and ``productId``; every other
    field is stored as sent.  Returns the stored order with its new
    ``id``.
    """
    try:
        body = await _read_json_body(request)
        return await OrderService(store).create_order(body)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.errors)
    except InternalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("/{order_id}", response_model=OrderDetail)
async def get_order(
    order_id: str = Path(..., description="ID of the order"),
    store: DocumentStore = Depends(get_store),
):
    """Retrieve an order with ``userId`` and ``productId`` expanded.

    An unknown ID yields 404 with an empty body.
    """
    try:
        order = await OrderService(store).get_order(order_id)
    except InternalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    if order is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return order
