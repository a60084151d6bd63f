"""Domain entity — a client the business performs projects for."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4


@dataclass
class Client:
    """Core domain entity for a client.

    ``custom_id`` is the short external client code (e.g. ``"1000"``) used
    as the first segment of every project and document display id. It is
    optional; identifiers composed without it use a placeholder.
    """

    name: str
    custom_id: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    notes: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def code(self) -> str | None:
        return self.custom_id

    def update(self, **changes: Any) -> None:
        """Apply the given field changes and refresh the updated_at timestamp."""
        for name, value in changes.items():
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
