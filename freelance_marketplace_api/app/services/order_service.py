"""
Business logic for orders.

Orders are never deleted.  The storage accepts any field of
:class:`OrderUpdate`; the API restricts which of them a client may
change.
"""

import logging
from typing import List, Optional

from ..core.storage import MemStorage, new_id, utcnow
from ..schemas.base import apply_patch
from ..schemas.order import Order, OrderCreate, OrderUpdate

logger = logging.getLogger(__name__)


class OrderService:
    """Operations on the orders collection."""

    def __init__(self, storage: MemStorage) -> None:
        self.storage = storage

    async def get_order(self, order_id: str) -> Optional[Order]:
        return self.storage.orders.get(order_id)

    async def get_orders_by_client(self, client_id: str) -> List[Order]:
        return [o for o in self.storage.orders.values() if o.client_id == client_id]

    async def get_orders_by_freelancer(self, freelancer_id: str) -> List[Order]:
        return [o for o in self.storage.orders.values() if o.freelancer_id == freelancer_id]

    async def create_order(self, data: OrderCreate) -> Order:
        """Place an order; ``completed_at`` starts empty."""
        order = Order(id=new_id(), created_at=utcnow(), completed_at=None, **data.model_dump())
        self.storage.orders[order.id] = order
        logger.info(
            "Created order %s on gig %s (client %s, freelancer %s)",
            order.id,
            order.gig_id,
            order.client_id,
            order.freelancer_id,
        )
        return order

    async def update_order(self, order_id: str, data: OrderUpdate) -> Optional[Order]:
        order = self.storage.orders.get(order_id)
        if order is None:
            logger.debug("Update for unknown order %s", order_id)
            return None
        updated = apply_patch(order, data)
        self.storage.orders[order_id] = updated
        logger.info("Updated order %s (status=%s, escrow=%s)", order_id, updated.status, updated.escrow_status)
        return updated
