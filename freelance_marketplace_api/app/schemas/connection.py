"""Pydantic models for client/freelancer connections."""

from datetime import datetime

from pydantic import Field

from .base import CamelModel, Record


class ConnectionCreate(CamelModel):
    client_id: str = Field(..., min_length=1)
    freelancer_id: str = Field(..., min_length=1)


class Connection(Record):
    id: str
    client_id: str
    freelancer_id: str
    created_at: datetime
