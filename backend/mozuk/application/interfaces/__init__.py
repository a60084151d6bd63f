from .user_repository import UserRepository
from .client_repository import ClientRepository
from .project_repository import ProjectRepository
from .document_repository import DocumentRepository

__all__ = [
    "UserRepository",
    "ClientRepository",
    "ProjectRepository",
    "DocumentRepository",
]
