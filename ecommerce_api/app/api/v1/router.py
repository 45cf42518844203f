"""
Top-level router for version 1 of the API.

This router aggregates the domain-specific routers (users, products,
orders).  When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import orders, products, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
