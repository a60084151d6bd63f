"""SQLAlchemy ORM model for the Project entity."""

from datetime import date, datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import Date, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mozuk.infrastructure.database.base import Base

if TYPE_CHECKING:
    from .client import ClientModel
    from .document import DocumentModel


class ProjectModel(Base):
    """ORM model — maps to the 'projects' table."""

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False
    )
    # Unique so that two creators racing to the same suggested suffix get a conflict
    display_id: Mapped[str | None] = mapped_column(String(100), nullable=True, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(30), nullable=False, default="ON_GOING")
    project_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    project_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    project_tag: Mapped[str] = mapped_column(String(30), nullable=False, default="MISC")
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

    client: Mapped["ClientModel"] = relationship(back_populates="projects")
    documents: Mapped[list["DocumentModel"]] = relationship(
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_projects_client", "client_id"),
        Index("ix_projects_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<ProjectModel(id={self.id}, display_id='{self.display_id}')>"
