"""Connection endpoints.  Connections can be created and listed, never changed."""

from typing import List

from fastapi import APIRouter, Depends, status

from freelance_marketplace_api.app.api.deps import get_connection_service
from freelance_marketplace_api.app.schemas.connection import Connection, ConnectionCreate
from freelance_marketplace_api.app.services import ConnectionService

router = APIRouter()


@router.get("/{client_id}", response_model=List[Connection])
async def list_connections(
    client_id: str, connections: ConnectionService = Depends(get_connection_service)
) -> List[Connection]:
    return await connections.get_connections_by_client(client_id)


@router.post("", response_model=Connection, status_code=status.HTTP_201_CREATED)
async def create_connection(
    connection_in: ConnectionCreate, connections: ConnectionService = Depends(get_connection_service)
) -> Connection:
    return await connections.create_connection(connection_in)
