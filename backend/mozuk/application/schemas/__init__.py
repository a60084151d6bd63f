from .auth import LoginRequest, LoginResponse, UserResponse
from .document import (
    DocumentCreate,
    DocumentListItem,
    DocumentResponse,
    DocumentUpdate,
    InvoiceDocumentCreate,
    OtherDocumentCreate,
    ProjectSummary,
    ReportDocumentCreate,
)
from .ledger import DashboardStatsResponse, IdentifierSuggestionResponse, LedgerResponse
from .project import (
    ClientSummary,
    ProjectCreate,
    ProjectDetailResponse,
    ProjectListItem,
    ProjectResponse,
    ProjectUpdate,
)
from .client import (
    ClientCreate,
    ClientDetailResponse,
    ClientFinancialsResponse,
    ClientListItem,
    ClientResponse,
    ClientUpdate,
    ProjectFinancials,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "UserResponse",
    "DocumentCreate",
    "DocumentListItem",
    "DocumentResponse",
    "DocumentUpdate",
    "InvoiceDocumentCreate",
    "OtherDocumentCreate",
    "ProjectSummary",
    "ReportDocumentCreate",
    "DashboardStatsResponse",
    "IdentifierSuggestionResponse",
    "LedgerResponse",
    "ClientSummary",
    "ProjectCreate",
    "ProjectDetailResponse",
    "ProjectListItem",
    "ProjectResponse",
    "ProjectUpdate",
    "ClientCreate",
    "ClientDetailResponse",
    "ClientFinancialsResponse",
    "ClientListItem",
    "ClientResponse",
    "ClientUpdate",
    "ProjectFinancials",
]
