"""Domain entity for project documents — invoices, reports, links and uploads."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import uuid4


class DocumentType(str, Enum):
    """Document classification. Only invoices carry amount/paid."""

    INVOICE = "INVOICE"
    REPORT = "REPORT"
    OTHERS = "OTHERS"


class DocumentStatus(str, Enum):
    PENDING = "PENDING"
    SUBMITTED = "SUBMITTED"


@dataclass
class Document:
    """Core domain entity: a document attached to a project.

    A document may be pure metadata (e.g. a link to an external report) or
    carry an uploaded file, in which case ``stored_path`` points at the copy
    held by the file storage.

    ``amount`` and ``paid`` are only meaningful for invoices. ``paid`` is
    tri-state: ``None`` means "not yet determined", not "unpaid".
    """

    project_id: str
    name: str
    document_type: DocumentType = DocumentType.OTHERS
    document_status: DocumentStatus = DocumentStatus.PENDING
    display_id: str | None = None
    document_date: date | None = None
    document_link: str | None = None
    amount: Decimal | None = None
    paid: bool | None = None
    # Upload metadata (absent for link/metadata-only documents)
    filename: str | None = None
    stored_path: str | None = None
    mime_type: str | None = None
    file_size: int | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def parent_id(self) -> str:
        return self.project_id

    @property
    def is_invoice(self) -> bool:
        return self.document_type == DocumentType.INVOICE

    @property
    def has_file(self) -> bool:
        return bool(self.stored_path)

    def update(self, **changes: Any) -> None:
        """Apply field changes; non-invoice documents never keep amount/paid."""
        for name, value in changes.items():
            setattr(self, name, value)
        if not self.is_invoice:
            self.amount = None
            self.paid = None
        self.updated_at = datetime.now(timezone.utc)
