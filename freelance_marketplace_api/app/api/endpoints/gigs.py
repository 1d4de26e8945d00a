"""
Gig endpoints.

These routes provide CRUD operations for gigs.  Listing accepts an
optional ``freelancerId`` query parameter to return only the gigs of
one freelancer.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from freelance_marketplace_api.app.api.deps import get_gig_service
from freelance_marketplace_api.app.schemas.gig import Gig, GigCreate, GigUpdate
from freelance_marketplace_api.app.services import GigService

router = APIRouter()


@router.get("", response_model=List[Gig])
async def list_gigs(
    freelancer_id: Optional[str] = Query(None, alias="freelancerId"),
    gigs: GigService = Depends(get_gig_service),
) -> List[Gig]:
    """Return all gigs, or only those of ``freelancerId`` when given."""
    if freelancer_id:
        return await gigs.get_gigs_by_freelancer(freelancer_id)
    return await gigs.get_all_gigs()


@router.get("/{gig_id}", response_model=Gig)
async def get_gig(gig_id: str, gigs: GigService = Depends(get_gig_service)) -> Gig:
    gig = await gigs.get_gig(gig_id)
    if gig is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gig not found")
    return gig


@router.post("", response_model=Gig, status_code=status.HTTP_201_CREATED)
async def create_gig(gig_in: GigCreate, gigs: GigService = Depends(get_gig_service)) -> Gig:
    return await gigs.create_gig(gig_in)


@router.patch("/{gig_id}", response_model=Gig)
async def update_gig(gig_id: str, gig_in: GigUpdate, gigs: GigService = Depends(get_gig_service)) -> Gig:
    gig = await gigs.update_gig(gig_id, gig_in)
    if gig is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gig not found")
    return gig


@router.delete("/{gig_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_gig(gig_id: str, gigs: GigService = Depends(get_gig_service)) -> None:
    deleted = await gigs.delete_gig(gig_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Gig not found")
    return None
