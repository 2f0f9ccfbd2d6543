"""
Pydantic models for user data.

A user is usually an integer ``id`` and a ``name``.  These models only
document that shape: the API stores whatever object the client sends,
including missing, extra or differently typed fields.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    id: Optional[int] = Field(None, examples=[3])
    name: Optional[str] = Field(None, examples=["Amy"])

    model_config = {"extra": "allow"}


class UserCreate(UserBase):
    """Schema for adding a user.  Ids are supplied by the caller."""


class UserRead(UserBase):
    """Schema for reading a user from the API."""
