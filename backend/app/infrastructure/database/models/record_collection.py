"""SQLAlchemy ORM model for persisted record collections."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base


class RecordCollectionModel(Base):
    """ORM model — maps to the 'record_collections' key-value table.

    One row per named collection; ``value`` holds the JSON text of the
    whole record list.
    """

    __tablename__ = "record_collections"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<RecordCollectionModel(key='{self.key}', size={len(self.value or '')})>"
