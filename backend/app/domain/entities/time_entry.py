"""Domain entities for time entries and their joined read model."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any

from .matter import Matter
from .timekeeper import Timekeeper

UNKNOWN = "Unknown"


@dataclass
class TimeEntry:
    """Hours a timekeeper worked on a matter on a given day.

    ``override_rate`` supersedes both the matter rate and the
    timekeeper's standard rate for this entry alone.
    """

    matter_id: int
    timekeeper_id: int
    date: date
    hours: float
    description: str = ""
    is_billable: bool = True
    override_rate: float | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    IMMUTABLE_FIELDS = frozenset({"id", "created_at"})

    def update(self, changes: dict[str, Any]) -> None:
        """Merge changed fields in; ``override_rate`` may be cleared with None."""
        for key, value in changes.items():
            if key in self.IMMUTABLE_FIELDS or not hasattr(self, key):
                continue
            setattr(self, key, value)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "matter_id": self.matter_id,
            "timekeeper_id": self.timekeeper_id,
            "date": self.date.isoformat(),
            "hours": self.hours,
            "description": self.description,
            "is_billable": self.is_billable,
            "override_rate": self.override_rate,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "TimeEntry":
        return cls(
            id=record["id"],
            matter_id=record["matter_id"],
            timekeeper_id=record["timekeeper_id"],
            date=date.fromisoformat(record["date"]),
            hours=record.get("hours") or 0,
            description=record.get("description") or "",
            is_billable=bool(record.get("is_billable", True)),
            override_rate=record.get("override_rate"),
            created_at=datetime.fromisoformat(record["created_at"]),
        )


@dataclass
class TimeEntryDetail(TimeEntry):
    """A time entry joined with the current timekeeper and matter rows."""

    timekeeper_name: str = UNKNOWN
    client_name: str = UNKNOWN
    matter_number: str = UNKNOWN
    matter_name: str = UNKNOWN

    @classmethod
    def join(
        cls,
        entry: TimeEntry,
        timekeeper: Timekeeper | None,
        matter: Matter | None,
    ) -> "TimeEntryDetail":
        """Build the joined view; missing references fall back to ``Unknown``."""
        return cls(
            id=entry.id,
            matter_id=entry.matter_id,
            timekeeper_id=entry.timekeeper_id,
            date=entry.date,
            hours=entry.hours,
            description=entry.description,
            is_billable=entry.is_billable,
            override_rate=entry.override_rate,
            created_at=entry.created_at,
            timekeeper_name=(timekeeper.name if timekeeper else "") or UNKNOWN,
            client_name=(matter.client_name if matter else "") or UNKNOWN,
            matter_number=(matter.matter_number if matter else "") or UNKNOWN,
            matter_name=(matter.matter_name if matter else "") or UNKNOWN,
        )
