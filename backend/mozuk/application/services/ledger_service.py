"""Application service for invoice ledgers — dashboard, client and project views.

Each call fetches a fresh snapshot of documents and hands it to the pure
ledger functions in ``mozuk.domain.ledger``.
"""

from dataclasses import dataclass

from mozuk.application.interfaces import (
    ClientRepository,
    DocumentRepository,
    ProjectRepository,
)
from mozuk.domain.entities import Project
from mozuk.domain.exceptions import EntityNotFoundError
from mozuk.domain.ledger import ALL, Ledger, aggregate, aggregate_by_parent


@dataclass
class DashboardStats:
    clients: int
    projects: int
    documents: int
    ledger: Ledger


@dataclass
class ClientFinancials:
    client_id: str
    projects: list[tuple[Project, Ledger]]
    total: Ledger


class LedgerService:
    def __init__(
        self,
        client_repository: ClientRepository,
        project_repository: ProjectRepository,
        document_repository: DocumentRepository,
    ):
        self._clients = client_repository
        self._projects = project_repository
        self._documents = document_repository

    async def dashboard(self) -> DashboardStats:
        documents = await self._documents.get_all(limit=None)
        return DashboardStats(
            clients=await self._clients.count(),
            projects=await self._projects.count(),
            documents=len(documents),
            ledger=aggregate(documents, ALL),
        )

    async def client_financials(self, client_id: str) -> ClientFinancials:
        """Per-project ledgers for a client plus their combined total."""
        if await self._clients.get_by_id(client_id) is None:
            raise EntityNotFoundError("Client", client_id)

        projects = await self._projects.get_all(client_id=client_id, limit=None)
        documents = await self._documents.get_all(
            project_ids=[p.id for p in projects], limit=None
        )
        by_project = aggregate_by_parent(documents)

        rows = [(project, by_project.get(project.id, Ledger.empty())) for project in projects]
        total = sum((ledger for _, ledger in rows), Ledger.empty())
        return ClientFinancials(client_id=client_id, projects=rows, total=total)

    async def project_ledger(self, project_id: str) -> Ledger:
        if await self._projects.get_by_id(project_id) is None:
            raise EntityNotFoundError("Project", project_id)
        documents = await self._documents.get_all(project_id=project_id, limit=None)
        return aggregate(documents, project_id)
