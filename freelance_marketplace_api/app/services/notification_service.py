"""
Business logic for notifications.

A notification can only move from unread to read; there is no
operation that marks it unread again.
"""

import logging
from typing import List, Optional

from ..core.storage import MemStorage, new_id, utcnow
from ..schemas.notification import Notification, NotificationCreate

logger = logging.getLogger(__name__)


class NotificationService:
    """Operations on the notifications collection."""

    def __init__(self, storage: MemStorage) -> None:
        self.storage = storage

    async def get_notifications_by_user(self, user_id: str) -> List[Notification]:
        return [n for n in self.storage.notifications.values() if n.user_id == user_id]

    async def create_notification(self, data: NotificationCreate) -> Notification:
        notification = Notification(id=new_id(), created_at=utcnow(), **data.model_dump())
        self.storage.notifications[notification.id] = notification
        logger.info("Created notification %s for user %s", notification.id, notification.user_id)
        return notification

    async def mark_notification_as_read(self, notification_id: str) -> Optional[Notification]:
        """Mark a notification as read.

        Returns the updated notification or ``None`` if it does not exist.
        """
        notification = self.storage.notifications.get(notification_id)
        if notification is None:
            logger.debug("Read mark for unknown notification %s", notification_id)
            return None
        updated = notification.model_copy(update={"read": True})
        self.storage.notifications[notification_id] = updated
        return updated
