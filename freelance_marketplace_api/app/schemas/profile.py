"""
Pydantic models for user profiles.

A profile holds the public details of a user.  Every user is expected
to have one profile, created during registration, but the storage does
not enforce this.
"""

from typing import List, Optional, Tuple

from pydantic import Field

from .base import CamelModel, PatchModel, Record


class ProfileCreate(CamelModel):
    """Schema for creating a profile."""

    user_id: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1, examples=["Ada"])
    last_name: str = Field(..., min_length=1, examples=["Lovelace"])
    country: str = Field(..., min_length=1, examples=["GB"])
    phone: str = Field(..., min_length=1, examples=["+441234567890"])
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    hourly_rate: Optional[float] = Field(None, ge=0)
    avatar: Optional[str] = None
    portfolio: Optional[List[str]] = None
    verified: bool = False


class ProfileUpdate(PatchModel):
    """Schema for updating a profile.

    All fields are optional; only provided values will be updated.
    The owning ``user_id`` cannot be changed, and only the optional
    details may be cleared with ``null``.
    """

    nullable_fields = frozenset({"bio", "skills", "hourly_rate", "avatar", "portfolio"})

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    country: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    hourly_rate: Optional[float] = Field(None, ge=0)
    avatar: Optional[str] = None
    portfolio: Optional[List[str]] = None
    verified: Optional[bool] = None


class Profile(Record):
    """Stored profile record."""

    id: str
    user_id: str
    first_name: str
    last_name: str
    country: str
    phone: str
    bio: Optional[str] = None
    skills: Optional[Tuple[str, ...]] = None
    hourly_rate: Optional[float] = None
    avatar: Optional[str] = None
    portfolio: Optional[Tuple[str, ...]] = None
    verified: bool = False
