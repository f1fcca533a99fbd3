"""Pydantic DTOs for matter rate overrides and billing results."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class MatterRateSet(BaseModel):
    """Schema for setting (creating or replacing) a matter rate override."""

    matter_id: int
    timekeeper_id: int
    override_rate: float = Field(..., ge=0, examples=[550.0])


class MatterRateResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    matter_id: int
    timekeeper_id: int
    override_rate: float
    created_at: datetime

    model_config = {"from_attributes": True}


class TimekeeperBillingResponse(BaseModel):
    timekeeper_id: int
    timekeeper_name: str
    billable_hours: float
    billable_amount: float
    rate_used: float

    model_config = {"from_attributes": True}


class BillingSummaryResponse(BaseModel):
    """Unrounded billing totals for a matter."""

    matter_id: int
    total_billable_hours: float
    total_non_billable_hours: float
    total_billable_amount: float
    timekeeper_breakdown: list[TimekeeperBillingResponse]

    model_config = {"from_attributes": True}


class RatePreviewRequest(BaseModel):
    """Inputs of a time entry that has not been saved yet."""

    matter_id: int
    timekeeper_id: int
    hours: float = Field(0, ge=0)
    override_rate: float | None = Field(None, ge=0)


class RatePreviewResponse(BaseModel):
    rate: float
    amount: float

    model_config = {"from_attributes": True}


class InvoiceResponse(BaseModel):
    """Rendered invoice document."""

    matter_id: int
    matter_number: str
    issued_on: date
    filename: str
    content: str
    total_amount: float

    model_config = {"from_attributes": True}
