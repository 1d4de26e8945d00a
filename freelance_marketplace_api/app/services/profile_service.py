"""
Business logic for profiles.

Besides the usual CRUD operations this service answers the freelancer
directory query, which joins the users and profiles collections.  The
join is recomputed on every call because both collections can change
independently between calls.
"""

import logging
from typing import List, Optional

from ..core.storage import MemStorage, new_id
from ..schemas.base import apply_patch
from ..schemas.profile import Profile, ProfileCreate, ProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:
    """Operations on the profiles collection."""

    def __init__(self, storage: MemStorage) -> None:
        self.storage = storage

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        """Return the first profile owned by ``user_id``."""
        for profile in self.storage.profiles.values():
            if profile.user_id == user_id:
                return profile
        return None

    async def get_profile_by_id(self, profile_id: str) -> Optional[Profile]:
        return self.storage.profiles.get(profile_id)

    async def create_profile(self, data: ProfileCreate) -> Profile:
        """Create a profile.

        Optional details (bio, skills, hourly rate, avatar, portfolio)
        default to ``None`` and ``verified`` defaults to ``False``.
        """
        profile = Profile(id=new_id(), **data.model_dump())
        self.storage.profiles[profile.id] = profile
        logger.info("Created profile %s for user %s", profile.id, profile.user_id)
        return profile

    async def update_profile(self, profile_id: str, data: ProfileUpdate) -> Optional[Profile]:
        """Merge the provided fields into a profile.

        Returns the updated profile or ``None`` if it does not exist.
        """
        profile = self.storage.profiles.get(profile_id)
        if profile is None:
            logger.debug("Update for unknown profile %s", profile_id)
            return None
        updated = apply_patch(profile, data)
        self.storage.profiles[profile_id] = updated
        logger.info("Updated profile %s", profile_id)
        return updated

    async def get_all_freelancer_profiles(self) -> List[Profile]:
        """Return every profile whose owner has the ``freelancer`` account type."""
        freelancer_ids = {
            user.id for user in self.storage.users.values() if user.account_type == "freelancer"
        }
        return [p for p in self.storage.profiles.values() if p.user_id in freelancer_ids]
