"""
Service layer abstraction.

Each service encapsulates the operations for one entity over a shared
:class:`~freelance_marketplace_api.app.core.storage.MemStorage`.  API
handlers only talk to services, so the in‑memory collections used here
can be replaced with database queries without changing the handlers.

Lookups return ``None`` (and deletes return ``False``) when a record
does not exist; services never raise for a missing id.
"""

from .connection_service import ConnectionService
from .gig_service import GigService
from .notification_service import NotificationService
from .order_service import OrderService
from .profile_service import ProfileService
from .project_service import ProjectService
from .user_service import UserService

__all__ = [
    "ConnectionService",
    "GigService",
    "NotificationService",
    "OrderService",
    "ProfileService",
    "ProjectService",
    "UserService",
]
