"""Pydantic DTOs (Data Transfer Objects) for the Client feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from mozuk.application.schemas._cleaning import blank_to_none
from mozuk.application.schemas.ledger import LedgerResponse
from mozuk.application.schemas.project import ProjectResponse


class ClientCreate(BaseModel):
    """Schema for creating a new client."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Harbour Logistics"])
    custom_id: str | None = Field(None, max_length=50, examples=["1000"])
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    company: str | None = Field(None, max_length=255)
    notes: str | None = None

    @field_validator("custom_id", "email", "phone", "company", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)


class ClientUpdate(BaseModel):
    """Schema for updating an existing client — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    custom_id: str | None = Field(None, max_length=50)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)
    company: str | None = Field(None, max_length=255)
    notes: str | None = None

    @field_validator("custom_id", "email", "phone", "company", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)


class ClientResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    custom_id: str | None
    name: str
    email: str | None
    phone: str | None
    company: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ClientListItem(ClientResponse):
    project_count: int = 0


class ClientDetailResponse(ClientResponse):
    projects: list[ProjectResponse] = Field(default_factory=list)


class ProjectFinancials(BaseModel):
    """Ledger for one of the client's projects."""

    project_id: str
    display_id: str | None
    name: str
    ledger: LedgerResponse


class ClientFinancialsResponse(BaseModel):
    client_id: str
    projects: list[ProjectFinancials]
    total: LedgerResponse
