"""Domain entity for matters — the engagements time is billed against."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class MatterStatus(str, Enum):
    """Lifecycle status of a matter."""

    ACTIVE = "active"
    ON_HOLD = "on_hold"
    CLOSED = "closed"


@dataclass
class Matter:
    """A legal engagement opened for a client.

    ``client_name`` is a snapshot of the client's name taken when the
    matter was created; later client renames are not propagated.
    ``matter_number`` is a four-digit sequence counted per client.
    """

    client_id: int
    client_name: str
    matter_name: str
    description: str = ""
    matter_number: str = ""
    status: MatterStatus = MatterStatus.ACTIVE
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    IMMUTABLE_FIELDS = frozenset({"id", "matter_number", "created_at"})

    def update(self, changes: dict[str, Any]) -> None:
        """Merge changed fields in; id, created_at and matter_number are kept."""
        for key, value in changes.items():
            if key in self.IMMUTABLE_FIELDS or not hasattr(self, key):
                continue
            if key == "status" and value is not None:
                value = MatterStatus(value)
            setattr(self, key, value)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "client_id": self.client_id,
            "client_name": self.client_name,
            "matter_number": self.matter_number,
            "matter_name": self.matter_name,
            "description": self.description,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Matter":
        return cls(
            id=record["id"],
            client_id=record["client_id"],
            client_name=record.get("client_name", ""),
            matter_number=record.get("matter_number", ""),
            matter_name=record.get("matter_name", ""),
            description=record.get("description") or "",
            status=MatterStatus(record.get("status") or MatterStatus.ACTIVE.value),
            created_at=datetime.fromisoformat(record["created_at"]),
        )
