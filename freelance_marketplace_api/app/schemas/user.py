"""
Pydantic models for user data.

``User`` is the stored record and carries the password.  It must never
be returned by the API directly; endpoints convert it to ``UserRead``,
which has no password field.  Passwords are kept in plain text in this
MVP; hash them (bcrypt/argon2) before any production use.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from .base import CamelModel, Record

AccountType = Literal["client", "freelancer"]


class UserCreate(CamelModel):
    """Schema for creating a user."""

    email: EmailStr = Field(..., examples=["user@example.com"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])
    account_type: AccountType = Field(..., examples=["freelancer"])


class User(Record):
    """Stored user record."""

    id: str
    email: str
    password: str
    account_type: AccountType
    wallet_address: Optional[str] = None
    created_at: datetime


class UserRead(Record):
    """Schema for returning a user from the API (no password)."""

    id: str
    email: str
    account_type: AccountType
    wallet_address: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserRead":
        return cls.model_validate(user.model_dump(exclude={"password"}))
