"""
Profile endpoints.

Profiles are read by the id of their owner and updated by their own
id.  The freelancer directory lists the profiles of every user with a
freelancer account.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from freelance_marketplace_api.app.api.deps import get_profile_service
from freelance_marketplace_api.app.schemas.profile import Profile, ProfileUpdate
from freelance_marketplace_api.app.services import ProfileService

router = APIRouter()


@router.get("/profile/{user_id}", response_model=Profile)
async def get_profile(user_id: str, profiles: ProfileService = Depends(get_profile_service)) -> Profile:
    """Retrieve the profile of a user.  Returns HTTP 404 if none exists."""
    profile = await profiles.get_profile(user_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


@router.patch("/profile/{profile_id}", response_model=Profile)
async def update_profile(
    profile_id: str,
    profile_in: ProfileUpdate,
    profiles: ProfileService = Depends(get_profile_service),
) -> Profile:
    profile = await profiles.update_profile(profile_id, profile_in)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


@router.get("/freelancers", response_model=List[Profile])
async def list_freelancers(profiles: ProfileService = Depends(get_profile_service)) -> List[Profile]:
    return await profiles.get_all_freelancer_profiles()
