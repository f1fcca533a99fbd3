"""Pydantic DTOs (Data Transfer Objects) for the Client feature."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


def _require_text(value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise ValueError("name must not be blank")
    return value


class ClientCreate(BaseModel):
    """Schema for creating a new client. Only ``name`` is required."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Acme Corporation"])
    description: str = ""
    address: str = ""
    contact_name: str = ""
    contact_phone: str = ""
    contact_email: str = ""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        return _require_text(value)


class ClientUpdate(BaseModel):
    """Schema for updating a client — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    address: str | None = None
    contact_name: str | None = None
    contact_phone: str | None = None
    contact_email: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        return _require_text(value)


class ClientSortOrder(str, Enum):
    """Supported orderings for client listings."""

    NAME = "name"
    CREATED = "created"


class ClientResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    client_number: str
    name: str
    description: str
    address: str
    contact_name: str
    contact_phone: str
    contact_email: str
    created_at: datetime

    model_config = {"from_attributes": True}
