"""
Business logic for gigs.

The freelancer id is stored as given; it is not checked against the
users collection.
"""

import logging
from typing import List, Optional

from ..core.storage import MemStorage, new_id, utcnow
from ..schemas.base import apply_patch
from ..schemas.gig import Gig, GigCreate, GigUpdate

logger = logging.getLogger(__name__)


class GigService:
    """Operations on the gigs collection."""

    def __init__(self, storage: MemStorage) -> None:
        self.storage = storage

    async def get_gig(self, gig_id: str) -> Optional[Gig]:
        return self.storage.gigs.get(gig_id)

    async def get_gigs_by_freelancer(self, freelancer_id: str) -> List[Gig]:
        return [g for g in self.storage.gigs.values() if g.freelancer_id == freelancer_id]

    async def get_all_gigs(self) -> List[Gig]:
        return list(self.storage.gigs.values())

    async def create_gig(self, data: GigCreate) -> Gig:
        """Create a gig with zero views."""
        gig = Gig(id=new_id(), views=0, created_at=utcnow(), **data.model_dump())
        self.storage.gigs[gig.id] = gig
        logger.info("Created gig %s for freelancer %s", gig.id, gig.freelancer_id)
        return gig

    async def update_gig(self, gig_id: str, data: GigUpdate) -> Optional[Gig]:
        gig = self.storage.gigs.get(gig_id)
        if gig is None:
            logger.debug("Update for unknown gig %s", gig_id)
            return None
        updated = apply_patch(gig, data)
        self.storage.gigs[gig_id] = updated
        logger.info("Updated gig %s", gig_id)
        return updated

    async def delete_gig(self, gig_id: str) -> bool:
        """Delete a gig by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        if self.storage.gigs.pop(gig_id, None) is None:
            logger.debug("Delete for unknown gig %s", gig_id)
            return False
        logger.info("Deleted gig %s", gig_id)
        return True
