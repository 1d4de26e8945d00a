"""
Request and response bodies for the authentication endpoints.

Registration creates a user and its profile in one call, so the
payload combines the user fields with the profile fields required at
sign‑up.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel
from .profile import Profile
from .user import UserCreate, UserRead


class RegisterRequest(UserCreate):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ConnectWalletRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    wallet_address: str = Field(..., min_length=1)


class AuthResponse(CamelModel):
    user: UserRead
    profile: Optional[Profile] = None


class WalletResponse(CamelModel):
    user: UserRead
