"""SQLAlchemy ORM model for the Document entity."""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mozuk.infrastructure.database.base import Base

if TYPE_CHECKING:
    from .project import ProjectModel


class DocumentModel(Base):
    """ORM model — maps to the 'documents' table."""

    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    project_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False
    )
    display_id: Mapped[str | None] = mapped_column(String(100), nullable=True, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    document_type: Mapped[str] = mapped_column(String(20), nullable=False, default="OTHERS")
    document_status: Mapped[str] = mapped_column(String(20), nullable=False, default="PENDING")
    document_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    document_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Invoice-only fields
    amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    paid: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    # Upload metadata
    filename: Mapped[str | None] = mapped_column(String(500), nullable=True)
    stored_path: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    mime_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    file_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    project: Mapped["ProjectModel"] = relationship(back_populates="documents")

    __table_args__ = (
        Index("ix_documents_project", "project_id"),
        Index("ix_documents_type", "document_type"),
        Index("ix_documents_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<DocumentModel(id={self.id}, display_id='{self.display_id}', type='{self.document_type}')>"
