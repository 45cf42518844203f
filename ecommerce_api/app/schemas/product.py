"""
Pydantic models for product data.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Mechanical keyboard"])
    price: float = Field(..., ge=0, examples=[89.9])
    description: Optional[str] = Field(None, examples=["Tenkeyless, brown switches"])
    stock: int = Field(0, ge=0, examples=[25])


class ProductCreate(ProductBase):
    """Schema for creating a product."""
    pass


class ProductRead(ProductBase):
    """Schema for reading a product."""

    id: str

    model_config = {
        "from_attributes": True,
    }
