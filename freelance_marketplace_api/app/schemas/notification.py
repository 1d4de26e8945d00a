"""Pydantic models for user notifications."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel, Record


class NotificationCreate(CamelModel):
    user_id: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1, examples=["You have a new order"])
    link: Optional[str] = Field(None, examples=["/orders/123"])
    read: bool = False


class Notification(Record):
    id: str
    user_id: str
    message: str
    link: Optional[str] = None
    read: bool = False
    created_at: datetime
