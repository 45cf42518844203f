"""
Business logic for users.

Users are plain records: register and fetch by id.  Passwords are
hashed before they reach the store and are dropped from every record
returned to callers.
"""

import logging
from typing import Optional

from ..core.db import DocumentStore
from ..core.exceptions import InternalError, StoreError
from ..core.security import hash_password
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Service for user records, bound to one document store."""

    collection = "users"

    def __init__(self, store: DocumentStore):
        self.store = store

    async def create_user(self, data: UserCreate) -> UserRead:
        """Register a user and return the stored record without password."""
        logger.info("Registering user %s", data.email)
        document = data.model_dump()
        document["password"] = hash_password(data.password)
        try:
            stored = await self.store.insert(self.collection, document)
        except StoreError as exc:
            logger.exception("Failed to store user %s", data.email)
            raise InternalError(exc) from exc
        return UserRead.model_validate(stored)

    async def get_user_by_id(self, user_id: str) -> Optional[UserRead]:
        """Retrieve a user by ID."""
        try:
            row = await self.store.find_by_id(self.collection, user_id)
        except StoreError as exc:
            logger.exception("Failed to load user %s", user_id)
            raise InternalError(exc) from exc
        if row:
            return UserRead.model_validate(row)
        return None
