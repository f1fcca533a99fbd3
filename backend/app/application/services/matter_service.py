"""Application service (use case) for Matter operations."""

import logging

from app.application.interfaces import CLIENTS, MATTERS, RecordStore
from app.application.schemas.matter import MatterCreate, MatterUpdate
from app.domain.entities import Client, Matter
from app.domain.exceptions import EntityNotFoundError, ReferentialIntegrityError

logger = logging.getLogger(__name__)

MATTER_NUMBER_WIDTH = 4


class MatterService:
    """Orchestrates matter logic against the matters collection."""

    def __init__(self, store: RecordStore):
        self._store = store

    async def _load(self) -> list[Matter]:
        return [Matter.from_record(r) for r in await self._store.read_all(MATTERS)]

    async def _save(self, matters: list[Matter]) -> None:
        await self._store.write_all(MATTERS, [m.to_record() for m in matters])

    async def create_matter(self, data: MatterCreate) -> Matter:
        """Open a matter, numbering it by how many matters the client has now.

        Holds the clients lock as well so a concurrent client delete cannot
        cascade past the new matter.
        """
        async with self._store.locked(CLIENTS, MATTERS):
            clients = [Client.from_record(r) for r in await self._store.read_all(CLIENTS)]
            client = next((c for c in clients if c.id == data.client_id), None)
            if client is None:
                raise ReferentialIntegrityError("Client", "client_id", data.client_id)

            matters = await self._load()
            siblings = sum(1 for m in matters if m.client_id == data.client_id)
            matter = Matter(
                client_id=data.client_id,
                client_name=client.name,
                matter_number=str(siblings).zfill(MATTER_NUMBER_WIDTH),
                matter_name=data.matter_name,
                description=data.description,
                status=data.status,
                id=await self._store.next_id(MATTERS),
            )
            matters.append(matter)
            await self._save(matters)

        logger.info(
            "Created matter %s-%s for client id=%d",
            client.client_number,
            matter.matter_number,
            client.id,
        )
        return matter

    async def get_matters(self) -> list[Matter]:
        matters = await self._load()
        return sorted(matters, key=lambda m: (m.created_at, m.id or 0), reverse=True)

    async def get_matter(self, matter_id: int) -> Matter | None:
        for matter in await self._load():
            if matter.id == matter_id:
                return matter
        return None

    async def update_matter(self, matter_id: int, data: MatterUpdate) -> Matter:
        async with self._store.locked(MATTERS):
            matters = await self._load()
            matter = next((m for m in matters if m.id == matter_id), None)
            if matter is None:
                raise EntityNotFoundError("Matter", matter_id)
            matter.update(data.model_dump(exclude_unset=True, exclude_none=True))
            await self._save(matters)

        logger.info("Updated matter id=%d", matter_id)
        return matter

    async def get_unique_clients(self) -> list[str]:
        """Distinct client names recorded on matters, sorted."""
        return sorted({m.client_name for m in await self._load()})
