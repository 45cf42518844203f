"""
User endpoints for API v1.

Registration and lookup by ID.  Request bodies are validated by the
``UserCreate`` schema.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ecommerce_api.app.core.db import DocumentStore, get_store
from ecommerce_api.app.core.exceptions import InternalError
from ecommerce_api.app.schemas.user import UserCreate, UserRead
from ecommerce_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user: UserCreate, store: DocumentStore = Depends(get_store)) -> UserRead:
    """Register a new user and return the created record."""
    try:
        return await UserService(store).create_user(user)
    except InternalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: str = Path(..., description="ID of the user"),
    store: DocumentStore = Depends(get_store),
) -> UserRead:
    try:
        user = await UserService(store).get_user_by_id(user_id)
    except InternalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
