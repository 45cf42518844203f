"""
Pydantic models for user data.

Defines schemas for registering users and reading them back.  The
password is accepted on registration only; it is stored hashed and
never returned through the API.
"""

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Jane Doe"])
    email: str = Field(..., min_length=3, examples=["jane@example.com"])


class UserCreate(UserBase):
    """Schema for registering a user."""

    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: str

    model_config = {
        "from_attributes": True,
    }
