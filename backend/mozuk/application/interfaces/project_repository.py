"""Abstract repository interface (port) for Project persistence."""

from abc import ABC, abstractmethod

from mozuk.domain.entities import Project


class ProjectRepository(ABC):
    """Port for project persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, project_id: str) -> Project | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        client_id: str | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> list[Project]:
        """Retrieve projects (optionally for one client), newest first.

        ``limit=None`` returns every match.
        """
        ...

    @abstractmethod
    async def get_by_ids(self, project_ids: list[str]) -> list[Project]:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def count_by_client(self) -> dict[str, int]:
        """Return ``{client_id: project_count}`` for clients with projects."""
        ...

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Persist a new project. Raises DuplicateEntityError on a taken display id."""
        ...

    @abstractmethod
    async def update(self, project: Project) -> Project:
        ...

    @abstractmethod
    async def delete(self, project_id: str) -> bool:
        ...
