"""Application service (use case) for Document operations — metadata, uploads and downloads."""

import logging
from decimal import Decimal
from pathlib import Path

from mozuk.application.interfaces import (
    ClientRepository,
    DocumentRepository,
    ProjectRepository,
)
from mozuk.application.schemas.document import DocumentCreate, DocumentUpdate
from mozuk.domain.entities import Document, DocumentType, Project
from mozuk.domain.exceptions import EntityNotFoundError, InvalidUploadError
from mozuk.domain.identifiers import (
    DOCUMENT_SUFFIX_DIGITS,
    IdentifierSuggestion,
    project_code,
    suggest_display_id,
)
from mozuk.infrastructure.storage.local_file_storage import LocalFileStorage

logger = logging.getLogger(__name__)


class DocumentService:
    """Orchestrates document CRUD, file storage and display-id suggestions."""

    def __init__(
        self,
        repository: DocumentRepository,
        project_repository: ProjectRepository,
        client_repository: ClientRepository,
        file_storage: LocalFileStorage,
        max_upload_bytes: int = 50 * 1024 * 1024,
    ):
        self._repository = repository
        self._projects = project_repository
        self._clients = client_repository
        self._storage = file_storage
        self._max_upload_bytes = max_upload_bytes

    async def get_document(self, document_id: str) -> Document:
        document = await self._repository.get_by_id(document_id)
        if document is None:
            raise EntityNotFoundError("Document", document_id)
        return document

    async def _get_project(self, project_id: str) -> Project:
        project = await self._projects.get_by_id(project_id)
        if project is None:
            raise EntityNotFoundError("Project", project_id)
        return project

    async def list_documents(
        self,
        *,
        project_id: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[tuple[Document, Project | None]]:
        """Return documents (newest first) with their owning project."""
        documents = await self._repository.get_all(project_id=project_id, skip=skip, limit=limit)
        projects = await self._projects.get_by_ids(list({d.project_id for d in documents}))
        by_id = {p.id: p for p in projects}
        return [(document, by_id.get(document.project_id)) for document in documents]

    async def suggest_display_id(
        self, project_id: str, suffix: str | None = None
    ) -> IdentifierSuggestion:
        """Propose the next ``<clientCode>-<projectCode>-<NN>`` id for a new document."""
        project = await self._get_project(project_id)
        client = await self._clients.get_by_id(project.client_id)
        siblings = (
            []
            if suffix is not None
            else await self._repository.get_all(project_id=project_id, limit=None)
        )
        return suggest_display_id(
            client.code if client else None,
            siblings,
            DOCUMENT_SUFFIX_DIGITS,
            extra_segment=project_code(project.display_id),
            suffix=suffix,
        )

    async def create_document(self, data: DocumentCreate) -> Document:
        await self._get_project(data.project_id)
        fields = data.model_dump()
        fields["document_type"] = DocumentType(fields["document_type"])
        document = Document(**fields)
        created = await self._repository.create(document)
        logger.info(
            "Created %s document %s in project %s",
            created.document_type.value,
            created.display_id or created.id,
            created.project_id,
        )
        return created

    async def upload_document(
        self,
        *,
        project_id: str,
        content: bytes,
        filename: str,
        content_type: str | None = None,
        name: str | None = None,
        document_type: DocumentType = DocumentType.OTHERS,
        display_id: str | None = None,
        amount: Decimal | None = None,
        paid: bool | None = None,
    ) -> Document:
        """Store an uploaded file and create the document record pointing at it.

        ``amount`` and ``paid`` are only kept for invoices.
        """
        await self._get_project(project_id)
        if not content:
            raise InvalidUploadError("No file uploaded")
        if len(content) > self._max_upload_bytes:
            raise InvalidUploadError(
                f"File exceeds the {self._max_upload_bytes // (1024 * 1024)} MB upload limit",
                too_large=True,
            )

        stored = await self._storage.store_file(content, filename, content_type)
        document = Document(
            project_id=project_id,
            name=(name or "").strip() or stored.original_name,
            document_type=document_type,
            display_id=display_id,
            filename=stored.filename,
            stored_path=stored.stored_path,
            mime_type=stored.mime_type,
            file_size=stored.file_size,
        )
        if document.is_invoice:
            document.amount = amount
            document.paid = paid
        try:
            return await self._repository.create(document)
        except Exception:
            # Keep disk and database consistent when the insert fails
            await self._storage.delete_file(stored.stored_path)
            raise

    async def get_download(self, document_id: str) -> tuple[Document, Path]:
        """Return the document and the on-disk path of its file."""
        document = await self.get_document(document_id)
        if not document.stored_path or not self._storage.file_exists(document.stored_path):
            raise EntityNotFoundError("File for document", document_id)
        return document, self._storage.get_file_path(document.stored_path)

    async def update_document(self, document_id: str, data: DocumentUpdate) -> Document:
        """Apply only the fields sent; the stored display id is never re-derived."""
        document = await self.get_document(document_id)
        changes = data.model_dump(exclude_unset=True)
        for required in ("project_id", "name", "document_type", "document_status"):
            if changes.get(required, ...) is None:
                changes.pop(required)
        if "project_id" in changes:
            await self._get_project(changes["project_id"])
        document.update(**changes)
        return await self._repository.update(document)

    async def delete_document(self, document_id: str) -> Document:
        """Delete the record and return it.

        The stored file is left in place; call :meth:`discard_file` once the
        deletion has been committed.
        """
        document = await self.get_document(document_id)
        await self._repository.delete(document_id)
        logger.info("Deleted document %s", document_id)
        return document

    async def discard_file(self, document: Document) -> bool:
        """Remove the stored file of a deleted document, if it had one."""
        if not document.stored_path:
            return False
        return await self._storage.delete_file(document.stored_path)
