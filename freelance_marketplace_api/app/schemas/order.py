"""
Pydantic models for orders.

An order is placed by a client on a freelancer's gig.  ``status`` and
``escrow_status`` are free‑form strings; both start as ``"pending"``.
``completed_at`` stays ``None`` until an update sets it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel, PatchModel, Record


class OrderCreate(CamelModel):
    """Schema for placing an order."""

    gig_id: str = Field(..., min_length=1)
    client_id: str = Field(..., min_length=1)
    freelancer_id: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0, examples=[50])
    status: str = Field("pending", min_length=1)
    escrow_status: str = Field("pending", min_length=1)
    delivery_date: Optional[datetime] = None


class OrderUpdate(PatchModel):
    """Patch applied to a stored order; only provided fields change."""

    nullable_fields = frozenset({"delivery_date", "completed_at"})

    amount: Optional[float] = Field(None, gt=0)
    status: Optional[str] = Field(None, min_length=1)
    escrow_status: Optional[str] = Field(None, min_length=1)
    delivery_date: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class OrderStatusUpdate(PatchModel):
    """Body accepted by ``PATCH /orders/{id}``.

    Only the status fields and the delivery date may be changed through
    the API.  Unknown fields are ignored rather than rejected.
    """

    nullable_fields = frozenset({"delivery_date"})

    status: Optional[str] = Field(None, min_length=1)
    escrow_status: Optional[str] = Field(None, min_length=1)
    delivery_date: Optional[datetime] = None

    def to_patch(self) -> OrderUpdate:
        return OrderUpdate(**self.model_dump(exclude_unset=True))


class Order(Record):
    id: str
    gig_id: str
    client_id: str
    freelancer_id: str
    amount: float
    status: str
    escrow_status: str
    delivery_date: Optional[datetime] = None
    created_at: datetime
    completed_at: Optional[datetime] = None
