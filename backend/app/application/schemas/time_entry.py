"""Pydantic DTOs for the TimeEntry feature."""

from datetime import date as Date, datetime

from pydantic import BaseModel, Field


class TimeEntryCreate(BaseModel):
    """Schema for recording time. Matter and timekeeper ids are not verified."""

    matter_id: int
    timekeeper_id: int
    date: Date
    hours: float = Field(..., ge=0, examples=[1.5])
    description: str = ""
    is_billable: bool = True
    override_rate: float | None = Field(None, ge=0)


class TimeEntryUpdate(BaseModel):
    """Schema for editing a time entry — all fields optional.

    Send ``override_rate: null`` explicitly to clear an entry-level rate.
    """

    matter_id: int | None = None
    timekeeper_id: int | None = None
    date: Date | None = None
    hours: float | None = Field(None, ge=0)
    description: str | None = None
    is_billable: bool | None = None
    override_rate: float | None = Field(None, ge=0)


class TimeEntryResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    matter_id: int
    timekeeper_id: int
    date: Date
    hours: float
    description: str
    is_billable: bool
    override_rate: float | None
    created_at: datetime

    model_config = {"from_attributes": True}


class TimeEntryDetailResponse(TimeEntryResponse):
    """Time entry with timekeeper and matter fields joined in."""

    timekeeper_name: str
    client_name: str
    matter_number: str
    matter_name: str
