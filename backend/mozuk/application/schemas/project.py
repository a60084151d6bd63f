"""Pydantic DTOs for the Project feature."""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from mozuk.application.schemas._cleaning import blank_to_none
from mozuk.application.schemas.document import DocumentResponse
from mozuk.domain.entities import ProjectStatus, ProjectTag


class ProjectCreate(BaseModel):
    """Schema for creating a project.

    ``display_id`` is normally the value proposed by ``/projects/next-id``,
    possibly with the numeric suffix edited by the user.
    """

    client_id: str = Field(..., min_length=1, max_length=36)
    name: str = Field(..., min_length=1, max_length=255)
    display_id: str | None = Field(None, max_length=100, examples=["1000-003"])
    description: str | None = None
    status: ProjectStatus = ProjectStatus.ON_GOING
    project_date: date | None = None
    project_location: str | None = Field(None, max_length=255)
    project_tag: ProjectTag = ProjectTag.MISC

    @field_validator(
        "display_id", "description", "project_date", "project_location", mode="before"
    )
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    @field_validator("project_tag", mode="before")
    @classmethod
    def _default_tag(cls, value):
        return blank_to_none(value) or ProjectTag.MISC


class ProjectUpdate(BaseModel):
    """Schema for updating a project — only fields sent are changed.

    The stored ``display_id`` is never re-derived; it changes only when the
    payload carries a new value.
    """

    client_id: str | None = Field(None, min_length=1, max_length=36)
    name: str | None = Field(None, min_length=1, max_length=255)
    display_id: str | None = Field(None, max_length=100)
    description: str | None = None
    status: ProjectStatus | None = None
    project_date: date | None = None
    project_location: str | None = Field(None, max_length=255)
    project_tag: ProjectTag | None = None

    @field_validator(
        "display_id", "description", "project_date", "project_location", mode="before"
    )
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)


class ClientSummary(BaseModel):
    id: str
    name: str
    custom_id: str | None

    model_config = {"from_attributes": True}


class ProjectResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    client_id: str
    display_id: str | None
    name: str
    description: str | None
    status: ProjectStatus
    project_date: date | None
    project_location: str | None
    project_tag: ProjectTag
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectListItem(ProjectResponse):
    client: ClientSummary | None = None
    document_count: int = 0


class ProjectDetailResponse(ProjectResponse):
    client: ClientSummary | None = None
    documents: list[DocumentResponse] = Field(default_factory=list)
