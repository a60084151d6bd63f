"""Translate unique-constraint violations into domain errors."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mozuk.domain.exceptions import DuplicateEntityError


async def flush_or_duplicate(
    session: AsyncSession, entity_type: str, field: str, value: str | None
) -> None:
    """Flush pending changes; a unique violation becomes DuplicateEntityError."""
    try:
        await session.flush()
    except IntegrityError as exc:
        raise DuplicateEntityError(entity_type, field, value or "") from exc
