"""Pydantic DTOs for the Matter feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.entities.matter import MatterStatus


class MatterCreate(BaseModel):
    """Schema for opening a matter for an existing client."""

    client_id: int
    matter_name: str = Field(..., min_length=1, max_length=255, examples=["Smith v. Jones"])
    description: str = ""
    status: MatterStatus = MatterStatus.ACTIVE


class MatterUpdate(BaseModel):
    """Schema for updating a matter — ``matter_number`` cannot be changed."""

    client_id: int | None = None
    client_name: str | None = None
    matter_name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: MatterStatus | None = None


class MatterResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    client_id: int
    client_name: str
    matter_number: str
    matter_name: str
    description: str
    status: MatterStatus
    created_at: datetime

    model_config = {"from_attributes": True}
