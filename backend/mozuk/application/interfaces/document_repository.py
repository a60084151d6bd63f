"""Abstract repository interface (port) for Document persistence."""

from abc import ABC, abstractmethod

from mozuk.domain.entities import Document


class DocumentRepository(ABC):
    """Port for document persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, document_id: str) -> Document | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        project_id: str | None = None,
        project_ids: list[str] | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> list[Document]:
        """Retrieve documents, newest first.

        ``project_id`` narrows to one project, ``project_ids`` to several;
        ``limit=None`` returns every match (used for ledger snapshots).
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def count_by_project(self) -> dict[str, int]:
        """Return ``{project_id: document_count}`` for projects with documents."""
        ...

    @abstractmethod
    async def create(self, document: Document) -> Document:
        """Persist a new document. Raises DuplicateEntityError on a taken display id."""
        ...

    @abstractmethod
    async def update(self, document: Document) -> Document:
        ...

    @abstractmethod
    async def delete(self, document_id: str) -> bool:
        ...
