"""Pydantic DTOs for the Document feature.

Creation payloads are a tagged union on ``document_type``: only
``InvoiceDocumentCreate`` accepts ``amount`` and ``paid``. Those keys sent
with a report or other document are ignored.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator

from mozuk.application.schemas._cleaning import blank_to_none
from mozuk.domain.entities import DocumentStatus, DocumentType


class _DocumentCreateBase(BaseModel):
    project_id: str = Field(..., min_length=1, max_length=36)
    name: str = Field(..., min_length=1, max_length=255)
    display_id: str | None = Field(None, max_length=100, examples=["1000-003-01"])
    document_status: DocumentStatus = DocumentStatus.PENDING
    document_date: date | None = None
    document_link: str | None = Field(None, max_length=2048)

    @field_validator("display_id", "document_date", "document_link", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)


class InvoiceDocumentCreate(_DocumentCreateBase):
    document_type: Literal["INVOICE"]
    amount: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    paid: bool | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def _blank_amount(cls, value):
        return blank_to_none(value)


class ReportDocumentCreate(_DocumentCreateBase):
    document_type: Literal["REPORT"]


class OtherDocumentCreate(_DocumentCreateBase):
    document_type: Literal["OTHERS"]


DocumentCreate = Annotated[
    Union[InvoiceDocumentCreate, ReportDocumentCreate, OtherDocumentCreate],
    Field(discriminator="document_type"),
]


class DocumentUpdate(BaseModel):
    """Partial update. amount/paid are dropped unless the result is an invoice."""

    project_id: str | None = Field(None, min_length=1, max_length=36)
    name: str | None = Field(None, min_length=1, max_length=255)
    display_id: str | None = Field(None, max_length=100)
    document_type: DocumentType | None = None
    document_status: DocumentStatus | None = None
    document_date: date | None = None
    document_link: str | None = Field(None, max_length=2048)
    amount: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    paid: bool | None = None

    @field_validator(
        "display_id", "document_date", "document_link", "amount", mode="before"
    )
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)


class ProjectSummary(BaseModel):
    id: str
    name: str
    display_id: str | None

    model_config = {"from_attributes": True}


class DocumentResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    project_id: str
    display_id: str | None
    name: str
    document_type: DocumentType
    document_status: DocumentStatus
    document_date: date | None
    document_link: str | None
    amount: Decimal | None
    paid: bool | None
    filename: str | None
    mime_type: str | None
    file_size: int | None
    has_file: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class DocumentListItem(DocumentResponse):
    project: ProjectSummary | None = None
