from .user import User
from .client import Client
from .project import Project, ProjectStatus, ProjectTag
from .document import Document, DocumentStatus, DocumentType

__all__ = [
    "User",
    "Client",
    "Project",
    "ProjectStatus",
    "ProjectTag",
    "Document",
    "DocumentStatus",
    "DocumentType",
]
