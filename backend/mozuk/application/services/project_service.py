"""Application service (use case) for Project operations."""

import logging

from mozuk.application.interfaces import (
    ClientRepository,
    DocumentRepository,
    ProjectRepository,
)
from mozuk.application.schemas.project import ProjectCreate, ProjectUpdate
from mozuk.domain.entities import Client, Document, Project
from mozuk.domain.exceptions import EntityNotFoundError
from mozuk.domain.identifiers import (
    PROJECT_SUFFIX_DIGITS,
    IdentifierSuggestion,
    suggest_display_id,
)

logger = logging.getLogger(__name__)


class ProjectService:
    """Orchestrates project CRUD and display-id suggestions."""

    def __init__(
        self,
        repository: ProjectRepository,
        client_repository: ClientRepository,
        document_repository: DocumentRepository,
    ):
        self._repository = repository
        self._clients = client_repository
        self._documents = document_repository

    async def get_project(self, project_id: str) -> Project:
        project = await self._repository.get_by_id(project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)
        return project

    async def _get_client(self, client_id: str) -> Client:
        client = await self._clients.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    async def list_projects(
        self,
        *,
        client_id: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[tuple[Project, Client | None, int]]:
        """Return projects with their client and document count."""
        projects = await self._repository.get_all(client_id=client_id, skip=skip, limit=limit)
        doc_counts = await self._documents.count_by_project()
        clients: dict[str, Client | None] = {}
        for client_id_ in {p.client_id for p in projects}:
            clients[client_id_] = await self._clients.get_by_id(client_id_)
        return [
            (project, clients.get(project.client_id), doc_counts.get(project.id, 0))
            for project in projects
        ]

    async def get_project_detail(
        self, project_id: str
    ) -> tuple[Project, Client | None, list[Document]]:
        project = await self.get_project(project_id)
        client = await self._clients.get_by_id(project.client_id)
        documents = await self._documents.get_all(project_id=project_id, limit=None)
        return project, client, documents

    async def suggest_display_id(
        self, client_id: str, suffix: str | None = None
    ) -> IdentifierSuggestion:
        """Propose the next ``<clientCode>-<NNN>`` id for a new project.

        A user-edited ``suffix`` is composed as given instead of re-scanning
        the client's projects.
        """
        client = await self._get_client(client_id)
        siblings = (
            []
            if suffix is not None
            else await self._repository.get_all(client_id=client_id, limit=None)
        )
        return suggest_display_id(
            client.code, siblings, PROJECT_SUFFIX_DIGITS, suffix=suffix
        )

    async def create_project(self, data: ProjectCreate) -> Project:
        await self._get_client(data.client_id)
        project = Project(**data.model_dump())
        created = await self._repository.create(project)
        logger.info("Created project %s for client %s", created.display_id, created.client_id)
        return created

    async def update_project(self, project_id: str, data: ProjectUpdate) -> Project:
        """Apply only the fields sent; the stored display id is never re-derived."""
        project = await self.get_project(project_id)
        changes = data.model_dump(exclude_unset=True)
        for required in ("client_id", "name", "status", "project_tag"):
            if changes.get(required, ...) is None:
                changes.pop(required)
        if "client_id" in changes:
            await self._get_client(changes["client_id"])
        project.update(**changes)
        return await self._repository.update(project)

    async def delete_project(self, project_id: str) -> bool:
        exists = await self._repository.get_by_id(project_id)
        if exists is None:
            raise EntityNotFoundError("Project", project_id)
        deleted = await self._repository.delete(project_id)
        logger.info("Deleted project %s", project_id)
        return deleted
