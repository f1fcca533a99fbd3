"""Application service (use case) for Client operations."""

import logging

from app.application.interfaces import CLIENTS, MATTERS, RecordStore
from app.application.schemas.client import ClientCreate, ClientSortOrder, ClientUpdate
from app.domain.entities import Client, Matter
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

CLIENT_NUMBER_WIDTH = 6


def _newest_first(clients: list[Client]) -> list[Client]:
    return sorted(clients, key=lambda c: (c.created_at, c.id or 0), reverse=True)


class ClientService:
    """Orchestrates client CRUD, search and the client → matter cascade."""

    def __init__(self, store: RecordStore):
        self._store = store

    async def _load(self) -> list[Client]:
        return [Client.from_record(r) for r in await self._store.read_all(CLIENTS)]

    async def _save(self, clients: list[Client]) -> None:
        await self._store.write_all(CLIENTS, [c.to_record() for c in clients])

    async def create_client(self, data: ClientCreate) -> Client:
        """Create a client numbered by the current client count.

        The number is count-based, so after a delete it can repeat one that
        was already handed out.
        """
        async with self._store.locked(CLIENTS):
            clients = await self._load()
            client = Client(
                name=data.name,
                client_number=str(len(clients)).zfill(CLIENT_NUMBER_WIDTH),
                description=data.description or "",
                address=data.address or "",
                contact_name=data.contact_name or "",
                contact_phone=data.contact_phone or "",
                contact_email=data.contact_email or "",
                id=await self._store.next_id(CLIENTS),
            )
            clients.append(client)
            await self._save(clients)

        logger.info("Created client %s (#%s, id=%d)", client.name, client.client_number, client.id)
        return client

    async def get_clients(self) -> list[Client]:
        return _newest_first(await self._load())

    async def get_client(self, client_id: int) -> Client | None:
        for client in await self._load():
            if client.id == client_id:
                return client
        return None

    async def update_client(self, client_id: int, data: ClientUpdate) -> Client:
        async with self._store.locked(CLIENTS):
            clients = await self._load()
            client = next((c for c in clients if c.id == client_id), None)
            if client is None:
                raise EntityNotFoundError("Client", client_id)
            client.update(data.model_dump(exclude_unset=True))
            await self._save(clients)

        logger.info("Updated client id=%d", client_id)
        return client

    async def delete_client(self, client_id: int) -> None:
        """Delete a client and every matter filed under it.

        Matters are written first so no reader ever sees matters whose
        client is already gone. Time entries and matter rates of those
        matters are left in place.
        """
        async with self._store.locked(CLIENTS, MATTERS):
            clients = await self._load()
            remaining = [c for c in clients if c.id != client_id]
            if len(remaining) == len(clients):
                raise EntityNotFoundError("Client", client_id)

            matters = await self._store.read_all(MATTERS)
            kept = [m for m in matters if m["client_id"] != client_id]
            await self._store.write_all(MATTERS, kept)
            await self._save(remaining)

        logger.info(
            "Deleted client id=%d and %d matter(s)", client_id, len(matters) - len(kept)
        )

    async def search_clients(self, query: str) -> list[Client]:
        """Case-insensitive substring search on name; blank returns all in stored order."""
        clients = await self._load()
        if not query.strip():
            return clients
        needle = query.lower()
        return [c for c in clients if needle in c.name.lower()]

    async def client_name_exists(self, name: str, exclude_id: int | None = None) -> bool:
        """Exact, case-sensitive name check used before create and rename."""
        return any(c.name == name and c.id != exclude_id for c in await self._load())

    async def get_clients_sorted(self, sort_by: ClientSortOrder | str) -> list[Client]:
        """By name: case-insensitive, ties broken case-sensitively. By created: newest first."""
        clients = await self._load()
        if ClientSortOrder(sort_by) is ClientSortOrder.NAME:
            return sorted(clients, key=lambda c: (c.name.casefold(), c.name))
        return _newest_first(clients)

    async def get_matters_for_client(self, client_id: int) -> list[Matter]:
        return [
            Matter.from_record(r)
            for r in await self._store.read_all(MATTERS)
            if r["client_id"] == client_id
        ]
