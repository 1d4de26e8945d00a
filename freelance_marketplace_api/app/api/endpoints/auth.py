"""
Authentication endpoints.

Provide registration, login and wallet connection.  Password handling
in this MVP is intentionally simplified (plain text storage and
comparison) and no session or token is issued; use a secure password
hashing algorithm and proper authentication in production.

Users are always returned as ``UserRead`` so the password never leaves
the process.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from freelance_marketplace_api.app.api.deps import get_profile_service, get_user_service
from freelance_marketplace_api.app.schemas.auth import (
    AuthResponse,
    ConnectWalletRequest,
    LoginRequest,
    RegisterRequest,
    WalletResponse,
)
from freelance_marketplace_api.app.schemas.profile import ProfileCreate
from freelance_marketplace_api.app.schemas.user import UserCreate, UserRead
from freelance_marketplace_api.app.services import ProfileService, UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    users: UserService = Depends(get_user_service),
    profiles: ProfileService = Depends(get_profile_service),
) -> AuthResponse:
    """Register a user together with their profile.

    Returns HTTP 400 if the email is already registered.
    """
    if await users.get_user_by_email(payload.email) is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
    user = await users.create_user(
        UserCreate(email=payload.email, password=payload.password, account_type=payload.account_type)
    )
    profile = await profiles.create_profile(
        ProfileCreate(
            user_id=user.id,
            first_name=payload.first_name,
            last_name=payload.last_name,
            country=payload.country,
            phone=payload.phone,
        )
    )
    return AuthResponse(user=UserRead.from_user(user), profile=profile)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    users: UserService = Depends(get_user_service),
    profiles: ProfileService = Depends(get_profile_service),
) -> AuthResponse:
    """Check the credentials and return the user with their profile."""
    user = await users.authenticate(payload.email, payload.password)
    if user is None:
        logger.info("Failed login for %s", payload.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    profile = await profiles.get_profile(user.id)
    return AuthResponse(user=UserRead.from_user(user), profile=profile)


@router.post("/connect-wallet", response_model=WalletResponse)
async def connect_wallet(
    payload: ConnectWalletRequest,
    users: UserService = Depends(get_user_service),
) -> WalletResponse:
    """Attach a wallet address to a user."""
    user = await users.update_user_wallet(payload.user_id, payload.wallet_address)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return WalletResponse(user=UserRead.from_user(user))
