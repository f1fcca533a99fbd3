"""Concrete RecordStore backed by a SQLAlchemy key-value table."""

import json
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.interfaces import Record, RecordStore
from app.infrastructure.database.base import Base
from app.infrastructure.database.models import RecordCollectionModel

logger = logging.getLogger(__name__)


class SQLAlchemyRecordStore(RecordStore):
    """Implements the RecordStore port with one row per collection.

    Every call runs in its own session; ``write_all`` commits before it
    returns so each whole-collection write is durable on its own.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        super().__init__()
        self._session_factory = session_factory

    async def create_schema(self) -> None:
        """Create the backing table if it does not exist."""
        async with self._session_factory() as session:
            connection = await session.connection()
            await connection.run_sync(Base.metadata.create_all)
            await session.commit()

    async def read_all(self, collection: str) -> list[Record]:
        self._check_collection(collection)
        async with self._session_factory() as session:
            model = await session.get(RecordCollectionModel, collection)
            if model is None or not model.value:
                return []
            return json.loads(model.value)

    async def write_all(self, collection: str, records: list[Record]) -> None:
        self._check_collection(collection)
        payload = json.dumps(records)
        async with self._session_factory() as session:
            try:
                model = await session.get(RecordCollectionModel, collection)
                if model is None:
                    session.add(RecordCollectionModel(key=collection, value=payload))
                else:
                    model.value = payload
                await session.commit()
            except Exception:
                await session.rollback()
                raise
        logger.debug("Wrote %d record(s) to '%s'", len(records), collection)
