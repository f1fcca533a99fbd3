"""Client CRUD, search and cascade-delete endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    ClientCreate,
    ClientResponse,
    ClientSortOrder,
    ClientUpdate,
    MatterResponse,
)
from app.application.services import ClientService
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.dependencies import get_client_service

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    q: str | None = Query(None, description="Case-insensitive name search"),
    sort: ClientSortOrder | None = Query(None, description="Sort by name or creation date"),
    service: ClientService = Depends(get_client_service),
) -> list[ClientResponse]:
    """List clients, newest first unless a search or sort is requested."""
    if q is not None:
        clients = await service.search_clients(q)
    elif sort is not None:
        clients = await service.get_clients_sorted(sort)
    else:
        clients = await service.get_clients()
    return [ClientResponse.model_validate(c, from_attributes=True) for c in clients]


@router.get("/name-exists")
async def client_name_exists(
    name: str = Query(..., min_length=1),
    exclude_id: int | None = Query(None),
    service: ClientService = Depends(get_client_service),
) -> dict:
    """Check whether another client already uses ``name``."""
    return {"exists": await service.client_name_exists(name, exclude_id)}


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    client = await service.get_client(client_id)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Client", client_id)),
        )
    return ClientResponse.model_validate(client, from_attributes=True)


@router.get("/{client_id}/matters", response_model=list[MatterResponse])
async def list_client_matters(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> list[MatterResponse]:
    """Matters that a delete of this client would remove."""
    matters = await service.get_matters_for_client(client_id)
    return [MatterResponse.model_validate(m, from_attributes=True) for m in matters]


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Create a client; names must be unique."""
    if await service.client_name_exists(data.name):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(DuplicateEntityError("Client", "name", data.name)),
        )
    client = await service.create_client(data)
    return ClientResponse.model_validate(client, from_attributes=True)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    if data.name is not None and await service.client_name_exists(data.name, client_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(DuplicateEntityError("Client", "name", data.name)),
        )
    try:
        client = await service.update_client(client_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientResponse.model_validate(client, from_attributes=True)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
) -> None:
    """Delete a client together with its matters."""
    try:
        await service.delete_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
