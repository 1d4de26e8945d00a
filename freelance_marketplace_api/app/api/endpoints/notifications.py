"""
Notification endpoints.

Clients list the notifications of a user, create new ones and mark a
single notification as read.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from freelance_marketplace_api.app.api.deps import get_notification_service
from freelance_marketplace_api.app.schemas.notification import Notification, NotificationCreate
from freelance_marketplace_api.app.services import NotificationService

router = APIRouter()


@router.get("/{user_id}", response_model=List[Notification])
async def list_notifications(
    user_id: str, notifications: NotificationService = Depends(get_notification_service)
) -> List[Notification]:
    return await notifications.get_notifications_by_user(user_id)


@router.post("", response_model=Notification, status_code=status.HTTP_201_CREATED)
async def create_notification(
    notification_in: NotificationCreate,
    notifications: NotificationService = Depends(get_notification_service),
) -> Notification:
    return await notifications.create_notification(notification_in)


@router.patch("/{notification_id}/read", response_model=Notification)
async def mark_as_read(
    notification_id: str, notifications: NotificationService = Depends(get_notification_service)
) -> Notification:
    notification = await notifications.mark_notification_as_read(notification_id)
    if notification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return notification
