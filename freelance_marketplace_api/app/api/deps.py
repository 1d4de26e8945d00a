"""
FastAPI dependencies.

The storage lives on ``app.state`` and is created by ``create_app``.
Each request builds the services it needs on top of that storage.
"""

from fastapi import Depends, Request

from ..core.storage import MemStorage
from ..services import (
    ConnectionService,
    GigService,
    NotificationService,
    OrderService,
    ProfileService,
    ProjectService,
    UserService,
)


def get_storage(request: Request) -> MemStorage:
    return request.app.state.storage


def get_user_service(storage: MemStorage = Depends(get_storage)) -> UserService:
    return UserService(storage)


def get_profile_service(storage: MemStorage = Depends(get_storage)) -> ProfileService:
    return ProfileService(storage)


def get_gig_service(storage: MemStorage = Depends(get_storage)) -> GigService:
    return GigService(storage)


def get_order_service(storage: MemStorage = Depends(get_storage)) -> OrderService:
    return OrderService(storage)


def get_connection_service(storage: MemStorage = Depends(get_storage)) -> ConnectionService:
    return ConnectionService(storage)


def get_project_service(storage: MemStorage = Depends(get_storage)) -> ProjectService:
    return ProjectService(storage)


def get_notification_service(storage: MemStorage = Depends(get_storage)) -> NotificationService:
    return NotificationService(storage)
