from .user_repository import SQLAlchemyUserRepository
from .client_repository import SQLAlchemyClientRepository
from .project_repository import SQLAlchemyProjectRepository
from .document_repository import SQLAlchemyDocumentRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyClientRepository",
    "SQLAlchemyProjectRepository",
    "SQLAlchemyDocumentRepository",
]
