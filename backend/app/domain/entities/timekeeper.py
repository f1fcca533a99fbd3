"""Domain entity for timekeepers — the people who record billable time."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class RateTier(str, Enum):
    """Seniority tier. Informational only; rates come from ``standard_rate``."""

    PARTNER = "partner"
    SENIOR_ASSOCIATE = "senior_associate"
    JUNIOR_ASSOCIATE = "junior_associate"
    PARALEGAL = "paralegal"


@dataclass
class Timekeeper:
    """An attorney or paralegal with a standard hourly rate."""

    name: str
    rate_tier: RateTier
    standard_rate: float
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "rate_tier": self.rate_tier.value,
            "standard_rate": self.standard_rate,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Timekeeper":
        return cls(
            id=record["id"],
            name=record.get("name", ""),
            rate_tier=RateTier(record["rate_tier"]),
            standard_rate=record.get("standard_rate") or 0,
            created_at=datetime.fromisoformat(record["created_at"]),
        )
