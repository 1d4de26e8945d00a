"""Business logic for connections.  Connections are append‑only."""

import logging
from typing import List, Optional

from ..core.storage import MemStorage, new_id, utcnow
from ..schemas.connection import Connection, ConnectionCreate

logger = logging.getLogger(__name__)


class ConnectionService:
    def __init__(self, storage: MemStorage) -> None:
        self.storage = storage

    async def get_connection(self, connection_id: str) -> Optional[Connection]:
        return self.storage.connections.get(connection_id)

    async def get_connections_by_client(self, client_id: str) -> List[Connection]:
        return [c for c in self.storage.connections.values() if c.client_id == client_id]

    async def create_connection(self, data: ConnectionCreate) -> Connection:
        connection = Connection(id=new_id(), created_at=utcnow(), **data.model_dump())
        self.storage.connections[connection.id] = connection
        logger.info("Connected client %s with %s", connection.client_id, connection.freelancer_id)
        return connection
