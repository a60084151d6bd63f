"""In-memory fake repositories shared by the service unit tests."""

import pytest

from mozuk.application.interfaces import (
    ClientRepository,
    DocumentRepository,
    ProjectRepository,
    UserRepository,
)
from mozuk.domain.entities import Client, Document, Project, User
from mozuk.domain.exceptions import DuplicateEntityError
from mozuk.infrastructure.storage.local_file_storage import LocalFileStorage


def _newest_first(items: dict) -> list:
    # dicts keep insertion order; the last inserted is the newest
    return list(reversed(items.values()))


def _page(items: list, skip: int, limit: int | None) -> list:
    return items[skip:] if limit is None else items[skip : skip + limit]


class FakeUserRepository(UserRepository):
    def __init__(self):
        self._users: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        wanted = email.strip().lower()
        return next((u for u in self._users.values() if u.email.lower() == wanted), None)

    async def create(self, user: User) -> User:
        if await self.get_by_email(user.email) is not None:
            raise DuplicateEntityError("User", "email", user.email)
        self._users[user.id] = user
        return user


class FakeClientRepository(ClientRepository):
    def __init__(self):
        self._clients: dict[str, Client] = {}
        self.projects: "FakeProjectRepository | None" = None

    async def get_by_id(self, client_id: str) -> Client | None:
        return self._clients.get(client_id)

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Client]:
        return _page(_newest_first(self._clients), skip, limit)

    async def count(self) -> int:
        return len(self._clients)

    def _check_unique(self, client: Client) -> None:
        if client.custom_id is None:
            return
        for other in self._clients.values():
            if other.id != client.id and other.custom_id == client.custom_id:
                raise DuplicateEntityError("Client", "custom_id", client.custom_id)

    async def create(self, client: Client) -> Client:
        self._check_unique(client)
        self._clients[client.id] = client
        return client

    async def update(self, client: Client) -> Client:
        if client.id not in self._clients:
            raise ValueError(f"Client {client.id} not found")
        self._check_unique(client)
        self._clients[client.id] = client
        return client

    async def delete(self, client_id: str) -> bool:
        if client_id not in self._clients:
            return False
        del self._clients[client_id]
        if self.projects is not None:
            await self.projects.delete_for_client(client_id)
        return True


class FakeProjectRepository(ProjectRepository):
    def __init__(self):
        self._projects: dict[str, Project] = {}
        self.documents: "FakeDocumentRepository | None" = None

    async def get_by_id(self, project_id: str) -> Project | None:
        return self._projects.get(project_id)

    async def get_all(
        self,
        *,
        client_id: str | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> list[Project]:
        projects = _newest_first(self._projects)
        if client_id is not None:
            projects = [p for p in projects if p.client_id == client_id]
        return _page(projects, skip, limit)

    async def get_by_ids(self, project_ids: list[str]) -> list[Project]:
        return [self._projects[i] for i in project_ids if i in self._projects]

    async def count(self) -> int:
        return len(self._projects)

    async def count_by_client(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for project in self._projects.values():
            counts[project.client_id] = counts.get(project.client_id, 0) + 1
        return counts

    def _check_unique(self, project: Project) -> None:
        if project.display_id is None:
            return
        for other in self._projects.values():
            if other.id != project.id and other.display_id == project.display_id:
                raise DuplicateEntityError("Project", "display_id", project.display_id)

    async def create(self, project: Project) -> Project:
        self._check_unique(project)
        self._projects[project.id] = project
        return project

    async def update(self, project: Project) -> Project:
        self._check_unique(project)
        self._projects[project.id] = project
        return project

    async def delete(self, project_id: str) -> bool:
        if project_id not in self._projects:
            return False
        del self._projects[project_id]
        if self.documents is not None:
            self.documents.delete_for_project(project_id)
        return True

    async def delete_for_client(self, client_id: str) -> None:
        for project in [p for p in self._projects.values() if p.client_id == client_id]:
            await self.delete(project.id)


class FakeDocumentRepository(DocumentRepository):
    def __init__(self):
        self._documents: dict[str, Document] = {}
        self.fail_on_create = False

    async def get_by_id(self, document_id: str) -> Document | None:
        return self._documents.get(document_id)

    async def get_all(
        self,
        *,
        project_id: str | None = None,
        project_ids: list[str] | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> list[Document]:
        documents = _newest_first(self._documents)
        if project_id is not None:
            documents = [d for d in documents if d.project_id == project_id]
        if project_ids is not None:
            documents = [d for d in documents if d.project_id in project_ids]
        return _page(documents, skip, limit)

    async def count(self) -> int:
        return len(self._documents)

    async def count_by_project(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for document in self._documents.values():
            counts[document.project_id] = counts.get(document.project_id, 0) + 1
        return counts

    def _check_unique(self, document: Document) -> None:
        if document.display_id is None:
            return
        for other in self._documents.values():
            if other.id != document.id and other.display_id == document.display_id:
                raise DuplicateEntityError("Document", "display_id", document.display_id)

    async def create(self, document: Document) -> Document:
        if self.fail_on_create:
            raise RuntimeError("insert failed")
        self._check_unique(document)
        self._documents[document.id] = document
        return document

    async def update(self, document: Document) -> Document:
        self._check_unique(document)
        self._documents[document.id] = document
        return document

    async def delete(self, document_id: str) -> bool:
        return self._documents.pop(document_id, None) is not None

    def delete_for_project(self, project_id: str) -> None:
        for document_id in [d.id for d in self._documents.values() if d.project_id == project_id]:
            del self._documents[document_id]


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def document_repository() -> FakeDocumentRepository:
    return FakeDocumentRepository()


@pytest.fixture
def project_repository(document_repository: FakeDocumentRepository) -> FakeProjectRepository:
    repository = FakeProjectRepository()
    repository.documents = document_repository
    return repository


@pytest.fixture
def client_repository(project_repository: FakeProjectRepository) -> FakeClientRepository:
    repository = FakeClientRepository()
    repository.projects = project_repository
    return repository


@pytest.fixture
def file_storage(tmp_path) -> LocalFileStorage:
    return LocalFileStorage(upload_dir=str(tmp_path / "uploads"))
