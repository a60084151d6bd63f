from .user import UserModel
from .client import ClientModel
from .project import ProjectModel
from .document import DocumentModel

__all__ = [
    "UserModel",
    "ClientModel",
    "ProjectModel",
    "DocumentModel",
]
