"""Concrete repository implementation for Document backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mozuk.application.interfaces import DocumentRepository
from mozuk.domain.entities import Document, DocumentStatus, DocumentType
from mozuk.infrastructure.database.models import DocumentModel

from ._integrity import flush_or_duplicate


class SQLAlchemyDocumentRepository(DocumentRepository):
    """Implements the DocumentRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: DocumentModel) -> Document:
        """Map ORM model → domain entity."""
        return Document(
            id=model.id,
            project_id=model.project_id,
            display_id=model.display_id,
            name=model.name,
            document_type=DocumentType(model.document_type),
            document_status=DocumentStatus(model.document_status),
            document_date=model.document_date,
            document_link=model.document_link,
            amount=model.amount,
            paid=model.paid,
            filename=model.filename,
            stored_path=model.stored_path,
            mime_type=model.mime_type,
            file_size=model.file_size,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _apply(self, model: DocumentModel, entity: Document) -> None:
        model.project_id = entity.project_id
        model.display_id = entity.display_id
        model.name = entity.name
        model.document_type = entity.document_type.value
        model.document_status = entity.document_status.value
        model.document_date = entity.document_date
        model.document_link = entity.document_link
        model.amount = entity.amount
        model.paid = entity.paid
        model.filename = entity.filename
        model.stored_path = entity.stored_path
        model.mime_type = entity.mime_type
        model.file_size = entity.file_size
        model.updated_at = entity.updated_at

    async def get_by_id(self, document_id: str) -> Document | None:
        result = await self._session.get(DocumentModel, document_id)
        return self._to_entity(result) if result else None

    async def get_all(
        self,
        *,
        project_id: str | None = None,
        project_ids: list[str] | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> list[Document]:
        stmt = select(DocumentModel)
        if project_id is not None:
            stmt = stmt.where(DocumentModel.project_id == project_id)
        if project_ids is not None:
            stmt = stmt.where(DocumentModel.project_id.in_(project_ids))
        stmt = stmt.order_by(DocumentModel.created_at.desc()).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(DocumentModel.id)))
        return result.scalar_one()

    async def count_by_project(self) -> dict[str, int]:
        stmt = select(DocumentModel.project_id, func.count(DocumentModel.id)).group_by(
            DocumentModel.project_id
        )
        result = await self._session.execute(stmt)
        return {project_id: count for project_id, count in result.all()}

    async def create(self, document: Document) -> Document:
        model = DocumentModel(id=document.id, created_at=document.created_at)
        self._apply(model, document)
        self._session.add(model)
        await flush_or_duplicate(self._session, "Document", "display_id", document.display_id)
        return self._to_entity(model)

    async def update(self, document: Document) -> Document:
        model = await self._session.get(DocumentModel, document.id)
        if model is None:
            raise ValueError(f"Document {document.id} not found in database")
        self._apply(model, document)
        await flush_or_duplicate(self._session, "Document", "display_id", document.display_id)
        return self._to_entity(model)

    async def delete(self, document_id: str) -> bool:
        model = await self._session.get(DocumentModel, document_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
