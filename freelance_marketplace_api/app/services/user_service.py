"""
Business logic for users.

Password handling is not secure in this MVP: passwords are stored and
compared in plain text.  Use a strong hashing algorithm (e.g. bcrypt)
and a constant time comparison in a production system.

Email uniqueness is not enforced here; the registration endpoint checks
:meth:`UserService.get_user_by_email` before creating a user.
"""

import logging
from typing import Optional

from ..core.storage import MemStorage, new_id, utcnow
from ..schemas.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """Operations on the users collection."""

    def __init__(self, storage: MemStorage) -> None:
        self.storage = storage

    async def get_user(self, user_id: str) -> Optional[User]:
        return self.storage.users.get(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Return the first user whose email matches exactly (case sensitive)."""
        for user in self.storage.users.values():
            if user.email == email:
                return user
        return None

    async def create_user(self, data: UserCreate) -> User:
        """Create a new user and return the stored record.

        ``wallet_address`` starts empty and ``created_at`` is set to the
        current time.
        """
        user = User(
            id=new_id(),
            email=data.email,
            password=data.password,
            account_type=data.account_type,
            wallet_address=None,
            created_at=utcnow(),
        )
        self.storage.users[user.id] = user
        logger.info("Registered %s user %s", user.account_type, user.id)
        return user

    async def update_user_wallet(self, user_id: str, wallet_address: str) -> Optional[User]:
        """Attach a wallet address to a user.

        Returns the updated user or ``None`` if the user does not exist.
        """
        user = self.storage.users.get(user_id)
        if user is None:
            logger.debug("Wallet update for unknown user %s", user_id)
            return None
        updated = user.model_copy(update={"wallet_address": wallet_address})
        self.storage.users[user_id] = updated
        logger.info("Connected wallet for user %s", user_id)
        return updated

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user if ``email`` and ``password`` match, else ``None``.

        The comparison is done on the plain text password.
        """
        user = await self.get_user_by_email(email)
        if user is None or user.password != password:
            return None
        return user
