"""
Pydantic models for projects.

A project is a job posted by a client for freelancers to pick up.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from pydantic import Field

from .base import CamelModel, PatchModel, Record


class ProjectCreate(CamelModel):
    client_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, examples=["Landing page"])
    description: str = Field(..., min_length=1)
    budget: float = Field(..., ge=0, examples=[500])
    skills: Optional[List[str]] = None
    deadline: Optional[datetime] = None


class ProjectUpdate(PatchModel):
    """Schema for updating a project.

    All fields are optional; only provided fields will be updated.
    """

    nullable_fields = frozenset({"skills", "deadline"})

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    budget: Optional[float] = Field(None, ge=0)
    skills: Optional[List[str]] = None
    deadline: Optional[datetime] = None


class Project(Record):
    id: str
    client_id: str
    title: str
    description: str
    budget: float
    skills: Optional[Tuple[str, ...]] = None
    deadline: Optional[datetime] = None
    created_at: datetime
