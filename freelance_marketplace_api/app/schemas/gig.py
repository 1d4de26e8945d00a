"""
Pydantic models for gigs.

A gig is a fixed‑price service offered by a freelancer.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import Field

from .base import CamelModel, PatchModel, Record


class GigCreate(CamelModel):
    freelancer_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, examples=["Logo design"])
    description: str = Field(..., min_length=1, examples=["A vector logo in three revisions"])
    price: float = Field(..., ge=0, examples=[50])
    skills: Optional[List[str]] = None
    images: Optional[List[str]] = None


class GigUpdate(PatchModel):
    """Schema for updating a gig.

    All fields are optional; only provided fields will be updated.
    """

    nullable_fields = frozenset({"skills", "images"})

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    skills: Optional[List[str]] = None
    images: Optional[List[str]] = None


class Gig(Record):
    id: str
    freelancer_id: str
    title: str
    description: str
    price: float
    skills: Optional[Tuple[str, ...]] = None
    images: Optional[Tuple[str, ...]] = None
    views: int = 0
    created_at: datetime
