"""Domain entity for clients — the parties matters are opened for."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class Client:
    """A billed client.

    ``client_number`` is a six-digit, zero-padded sequence assigned at
    creation from the number of clients stored at that moment.
    """

    name: str
    client_number: str = ""
    description: str = ""
    address: str = ""
    contact_name: str = ""
    contact_phone: str = ""
    contact_email: str = ""
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    IMMUTABLE_FIELDS = frozenset({"id", "client_number", "created_at"})

    def update(self, changes: dict[str, Any]) -> None:
        """Merge changed fields in; identity and numbering never change."""
        for key, value in changes.items():
            if key in self.IMMUTABLE_FIELDS or not hasattr(self, key):
                continue
            if key == "name" and value is None:
                continue
            setattr(self, key, value if value is not None else "")

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "client_number": self.client_number,
            "name": self.name,
            "description": self.description,
            "address": self.address,
            "contact_name": self.contact_name,
            "contact_phone": self.contact_phone,
            "contact_email": self.contact_email,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Client":
        return cls(
            id=record["id"],
            client_number=record.get("client_number", ""),
            name=record.get("name", ""),
            description=record.get("description") or "",
            address=record.get("address") or "",
            contact_name=record.get("contact_name") or "",
            contact_phone=record.get("contact_phone") or "",
            contact_email=record.get("contact_email") or "",
            created_at=datetime.fromisoformat(record["created_at"]),
        )
