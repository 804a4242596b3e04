"""
Pydantic schemas for accounts and login tokens.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserBase(BaseModel):
    """Base user schema."""

    email: EmailStr
    username: Optional[str] = Field(default=None, min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    full_name: Optional[str] = None


class UserCreate(UserBase):
    """Registration payload. Self-registered accounts are always students."""

    password: str = Field(..., min_length=8, max_length=72)


class User(UserBase):
    """Schema for user response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    role: str
    is_active: bool
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None


class Token(BaseModel):
    """Bearer token returned by login."""

    access_token: str
    expires_in: int
    token_type: str = "bearer"
