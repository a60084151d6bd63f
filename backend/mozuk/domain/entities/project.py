"""Domain entity — a project performed for a client."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class ProjectStatus(str, Enum):
    """Lifecycle states of a project."""

    ON_GOING = "ON_GOING"
    COMPLETE_SOLVED = "COMPLETE_SOLVED"
    COMPLETE_NOT_SOLVED = "COMPLETE_NOT_SOLVED"
    CANCELLED = "CANCELLED"


class ProjectTag(str, Enum):
    """Business line a project is booked under."""

    MISC = "MISC"
    MOZUK = "MOZUK"
    MOZUK_MARINE = "MOZUK_MARINE"


@dataclass
class Project:
    """Core domain entity: a project owned by a client.

    ``display_id`` is the composite human-readable id
    (``"<clientCode>-<NNN>"``). Once assigned it is treated as opaque and
    only changes through an explicit update.
    """

    client_id: str
    name: str
    display_id: str | None = None
    description: str | None = None
    status: ProjectStatus = ProjectStatus.ON_GOING
    project_date: date | None = None
    project_location: str | None = None
    project_tag: ProjectTag = ProjectTag.MISC
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def parent_id(self) -> str:
        return self.client_id

    def update(self, **changes: Any) -> None:
        """Apply the given field changes and refresh the updated_at timestamp."""
        for name, value in changes.items():
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
