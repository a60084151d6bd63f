from .auth_service import AuthService
from .client_service import ClientService
from .project_service import ProjectService
from .document_service import DocumentService
from .ledger_service import ClientFinancials, DashboardStats, LedgerService

__all__ = [
    "AuthService",
    "ClientService",
    "ProjectService",
    "DocumentService",
    "LedgerService",
    "ClientFinancials",
    "DashboardStats",
]
