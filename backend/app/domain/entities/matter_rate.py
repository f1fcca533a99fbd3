"""Domain entity for per-matter timekeeper rate overrides."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class MatterRate:
    """Hourly rate that replaces a timekeeper's standard rate on one matter.

    At most one exists per (matter_id, timekeeper_id); writes go through
    an upsert.
    """

    matter_id: int
    timekeeper_id: int
    override_rate: float
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "matter_id": self.matter_id,
            "timekeeper_id": self.timekeeper_id,
            "override_rate": self.override_rate,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "MatterRate":
        return cls(
            id=record["id"],
            matter_id=record["matter_id"],
            timekeeper_id=record["timekeeper_id"],
            override_rate=record["override_rate"],
            created_at=datetime.fromisoformat(record["created_at"]),
        )
