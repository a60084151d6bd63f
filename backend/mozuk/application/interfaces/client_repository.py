"""Abstract repository interface (port) for Client persistence."""

from abc import ABC, abstractmethod

from mozuk.domain.entities import Client


class ClientRepository(ABC):
    """Port for client persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Client | None:
        """Retrieve a single client by its UUID."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Client]:
        """Retrieve clients, newest first."""
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """Persist a new client. Raises DuplicateEntityError on a taken code."""
        ...

    @abstractmethod
    async def update(self, client: Client) -> Client:
        ...

    @abstractmethod
    async def delete(self, client_id: str) -> bool:
        """Delete a client and, by cascade, its projects and documents."""
        ...
