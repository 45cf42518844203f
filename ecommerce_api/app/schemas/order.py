"""
Pydantic models for orders.

An order references a user and a product by identifier.  On the wire
the references are ``userId`` and ``productId``; any other field in
the creation body (``quantity``, client timestamps, notes) is kept and
returned verbatim, which is why every order model allows extra fields.

``OrderDetail`` is the read model returned by ``GET /orders/{id}``:
the two references are replaced by the full user and product records.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .product import ProductRead
from .user import UserRead


class OrderBase(BaseModel):
    user_id: str = Field(..., alias="userId", min_length=1, examples=["9f1c2e..."])
    product_id: str = Field(..., alias="productId", min_length=1, examples=["4b7a0d..."])

    model_config = {
        "extra": "allow",
    }


class OrderCreate(OrderBase):
    """Schema for creating an order."""
    pass


class OrderRead(OrderBase):
    """Schema for an order as stored, with unresolved references."""

    id: str


class OrderDetail(BaseModel):
    """Order with ``userId`` and ``productId`` resolved to full records.

    A reference whose target no longer exists is returned as ``null``.
    """

    id: str
    user_id: Optional[UserRead] = Field(None, alias="userId")
    product_id: Optional[ProductRead] = Field(None, alias="productId")

    model_config = {
        "extra": "allow",
    }
