"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from mozuk.config import get_settings
from mozuk.application.services import (
    AuthService,
    ClientService,
    DocumentService,
    LedgerService,
    ProjectService,
)
from mozuk.domain.entities import User
from mozuk.domain.exceptions import AuthenticationError
from mozuk.infrastructure.database.session import get_db_session
from mozuk.infrastructure.database.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyDocumentRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyUserRepository,
)
from mozuk.infrastructure.security import TokenService
from mozuk.infrastructure.storage.local_file_storage import LocalFileStorage

# auto_error=False so a missing header is reported as 401, not 403
_bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService with the user repository and token service wired up."""
    settings = get_settings()
    yield AuthService(
        SQLAlchemyUserRepository(session),
        get_token_service(),
        bcrypt_rounds=settings.bcrypt_rounds,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """Resolve ``Authorization: Bearer <token>`` to the signed-in user, or 401."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return await auth_service.authenticate(credentials.credentials)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_client_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ClientService, None]:
    """Provides a ClientService instance with its repositories wired up."""
    yield ClientService(
        SQLAlchemyClientRepository(session),
        SQLAlchemyProjectRepository(session),
    )


async def get_project_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProjectService, None]:
    """Provides a ProjectService instance with its repositories wired up."""
    yield ProjectService(
        SQLAlchemyProjectRepository(session),
        SQLAlchemyClientRepository(session),
        SQLAlchemyDocumentRepository(session),
    )


async def get_document_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DocumentService, None]:
    """Provides a DocumentService with repositories and local file storage."""
    settings = get_settings()
    yield DocumentService(
        SQLAlchemyDocumentRepository(session),
        SQLAlchemyProjectRepository(session),
        SQLAlchemyClientRepository(session),
        LocalFileStorage(upload_dir=settings.upload_dir),
        max_upload_bytes=settings.max_upload_size_bytes,
    )


async def get_ledger_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[LedgerService, None]:
    """Provides a LedgerService reading clients, projects and documents."""
    yield LedgerService(
        SQLAlchemyClientRepository(session),
        SQLAlchemyProjectRepository(session),
        SQLAlchemyDocumentRepository(session),
    )
