"""Application service for signing users in and resolving bearer tokens."""

import logging

from mozuk.application.interfaces import UserRepository
from mozuk.domain.entities import User
from mozuk.domain.exceptions import AuthenticationError
from mozuk.infrastructure.security import TokenService, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Verifies credentials, issues tokens and seeds the default administrator."""

    def __init__(
        self,
        repository: UserRepository,
        token_service: TokenService,
        bcrypt_rounds: int = 12,
    ):
        self._repository = repository
        self._tokens = token_service
        self._bcrypt_rounds = bcrypt_rounds

    async def login(self, email: str, password: str) -> tuple[str, User]:
        """Return ``(token, user)`` for valid credentials."""
        user = await self._repository.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for %s", email)
            raise AuthenticationError("Invalid credentials")
        logger.info("User %s signed in", user.email)
        return self._tokens.create_access_token(user.id), user

    async def authenticate(self, token: str) -> User:
        """Resolve a bearer token to its user."""
        user_id = self._tokens.decode_access_token(token)
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise AuthenticationError("Invalid token")
        return user

    async def ensure_user(self, email: str, password: str, name: str | None = None) -> User:
        """Create the user unless one with this email already exists."""
        existing = await self._repository.get_by_email(email)
        if existing is not None:
            logger.debug("User %s already exists", email)
            return existing
        user = User(
            email=email.strip().lower(),
            name=name,
            password_hash=hash_password(password, rounds=self._bcrypt_rounds),
        )
        created = await self._repository.create(user)
        logger.info("Seeded user %s", created.email)
        return created
