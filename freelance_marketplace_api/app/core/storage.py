"""
In‑memory storage for the marketplace.

``MemStorage`` owns one keyed collection per entity.  Records are
stored as frozen pydantic models keyed by their id, so an update always
replaces the stored record instead of mutating it in place.  The
storage is created empty and lives as long as the application that
holds it; nothing is persisted across restarts.

The per‑entity services in ``app.services`` implement all reads and
writes on top of these collections.  Keeping the collections in a
single injectable object lets tests use a fresh storage per case and
leaves room for swapping in a database‑backed implementation behind
the same service interface.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Dict

from ..schemas.connection import Connection
from ..schemas.gig import Gig
from ..schemas.notification import Notification
from ..schemas.order import Order
from ..schemas.profile import Profile
from ..schemas.project import Project
from ..schemas.user import User


def new_id() -> str:
    """Return a fresh random identifier for a record."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemStorage:
    """Seven independent collections, one per entity kind."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.profiles: Dict[str, Profile] = {}
        self.gigs: Dict[str, Gig] = {}
        self.orders: Dict[str, Order] = {}
        self.connections: Dict[str, Connection] = {}
        self.projects: Dict[str, Project] = {}
        self.notifications: Dict[str, Notification] = {}

    def __repr__(self) -> str:
        sizes = ", ".join(
            f"{name}={len(getattr(self, name))}"
            for name in ("users", "profiles", "gigs", "orders", "connections", "projects", "notifications")
        )
        return f"MemStorage({sizes})"
