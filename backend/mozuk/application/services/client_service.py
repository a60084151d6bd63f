"""Application service (use case) for Client operations."""

import logging

from mozuk.application.interfaces import ClientRepository, ProjectRepository
from mozuk.application.schemas.client import ClientCreate, ClientUpdate
from mozuk.domain.entities import Client, Project
from mozuk.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ClientService:
    """Orchestrates client CRUD logic. Depends on the repository ports (DI)."""

    def __init__(self, repository: ClientRepository, project_repository: ProjectRepository):
        self._repository = repository
        self._projects = project_repository

    async def get_client(self, client_id: str) -> Client:
        client = await self._repository.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    async def list_clients(
        self, skip: int = 0, limit: int = 100
    ) -> list[tuple[Client, int]]:
        """Return clients (newest first) paired with their project count."""
        clients = await self._repository.get_all(skip=skip, limit=limit)
        counts = await self._projects.count_by_client()
        return [(client, counts.get(client.id, 0)) for client in clients]

    async def get_client_with_projects(self, client_id: str) -> tuple[Client, list[Project]]:
        client = await self.get_client(client_id)
        projects = await self._projects.get_all(client_id=client_id, limit=None)
        return client, projects

    async def create_client(self, data: ClientCreate) -> Client:
        client = Client(**data.model_dump())
        created = await self._repository.create(client)
        logger.info("Created client %s (%s)", created.name, created.custom_id or "no code")
        return created

    async def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        client = await self.get_client(client_id)
        changes = data.model_dump(exclude_unset=True)
        # name is required on the entity; an explicit null leaves it unchanged
        if changes.get("name") is None:
            changes.pop("name", None)
        client.update(**changes)
        return await self._repository.update(client)

    async def delete_client(self, client_id: str) -> bool:
        exists = await self._repository.get_by_id(client_id)
        if exists is None:
            raise EntityNotFoundError("Client", client_id)
        deleted = await self._repository.delete(client_id)
        logger.info("Deleted client %s with its projects and documents", client_id)
        return deleted
