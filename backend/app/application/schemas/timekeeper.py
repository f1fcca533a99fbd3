"""Pydantic DTOs for the Timekeeper feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.entities.timekeeper import RateTier


class TimekeeperCreate(BaseModel):
    """Schema for registering a timekeeper."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Jane Partner"])
    rate_tier: RateTier = RateTier.JUNIOR_ASSOCIATE
    standard_rate: float = Field(..., ge=0, examples=[500.0])


class TimekeeperResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    rate_tier: RateTier
    standard_rate: float
    created_at: datetime

    model_config = {"from_attributes": True}
