"""
Product endpoints for API v1.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ecommerce_api.app.core.db import DocumentStore, get_store
from ecommerce_api.app.core.exceptions import InternalError
from ecommerce_api.app.schemas.product import ProductCreate, ProductRead
from ecommerce_api.app.services.product_service import ProductService


router = APIRouter()


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def add_product(product: ProductCreate, store: DocumentStore = Depends(get_store)) -> ProductRead:
    """Add a product to the catalogue."""
    try:
        return await ProductService(store).create_product(product)
    except InternalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: str = Path(..., description="ID of the product"),
    store: DocumentStore = Depends(get_store),
) -> ProductRead:
    try:
        product = await ProductService(store).get_product(product_id)
    except InternalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product
