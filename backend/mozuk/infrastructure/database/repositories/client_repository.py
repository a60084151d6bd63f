"""Concrete repository implementation for Client backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mozuk.application.interfaces import ClientRepository
from mozuk.domain.entities import Client
from mozuk.infrastructure.database.models import ClientModel

from ._integrity import flush_or_duplicate


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientModel) -> Client:
        """Map ORM model → domain entity."""
        return Client(
            id=model.id,
            custom_id=model.custom_id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            company=model.company,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Client) -> ClientModel:
        """Map domain entity → ORM model (for creation)."""
        return ClientModel(
            id=entity.id,
            custom_id=entity.custom_id,
            name=entity.name,
            email=entity.email,
            phone=entity.phone,
            company=entity.company,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, client_id: str) -> Client | None:
        result = await self._session.get(ClientModel, client_id)
        return self._to_entity(result) if result else None

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Client]:
        stmt = (
            select(ClientModel)
            .order_by(ClientModel.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(ClientModel.id)))
        return result.scalar_one()

    async def create(self, client: Client) -> Client:
        model = self._to_model(client)
        self._session.add(model)
        await flush_or_duplicate(self._session, "Client", "custom_id", client.custom_id)
        return self._to_entity(model)

    async def update(self, client: Client) -> Client:
        model = await self._session.get(ClientModel, client.id)
        if model is None:
            raise ValueError(f"Client {client.id} not found in database")
        model.custom_id = client.custom_id
        model.name = client.name
        model.email = client.email
        model.phone = client.phone
        model.company = client.company
        model.notes = client.notes
        model.updated_at = client.updated_at
        await flush_or_duplicate(self._session, "Client", "custom_id", client.custom_id)
        return self._to_entity(model)

    async def delete(self, client_id: str) -> bool:
        model = await self._session.get(ClientModel, client_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
