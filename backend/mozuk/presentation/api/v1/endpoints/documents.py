"""Document endpoints — typed metadata CRUD, file upload and download."""

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.ext.asyncio import AsyncSession

from mozuk.application.schemas.document import (
    DocumentCreate,
    DocumentListItem,
    DocumentResponse,
    DocumentUpdate,
    ProjectSummary,
)
from mozuk.application.schemas.ledger import IdentifierSuggestionResponse
from mozuk.application.services import DocumentService
from mozuk.domain.entities import DocumentType
from mozuk.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidUploadError,
)
from mozuk.infrastructure.database.session import get_db_session
from mozuk.infrastructure.dependencies import get_current_user, get_document_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/documents",
    tags=["Documents"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[DocumentListItem])
async def list_documents(
    project_id: str | None = Query(None, description="Filter by project ID"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: DocumentService = Depends(get_document_service),
) -> list[DocumentListItem]:
    """List documents, newest first, with their project summary."""
    rows = await service.list_documents(project_id=project_id, skip=skip, limit=limit)
    return [
        DocumentListItem.model_validate(document, from_attributes=True).model_copy(
            update={
                "project": ProjectSummary.model_validate(project, from_attributes=True)
                if project
                else None
            }
        )
        for document, project in rows
    ]


@router.get("/next-id", response_model=IdentifierSuggestionResponse)
async def suggest_document_id(
    project_id: str = Query(..., description="Project the new document belongs to"),
    suffix: str | None = Query(
        None, pattern=r"^[0-9]*$", description="User-edited numeric suffix to compose as-is"
    ),
    service: DocumentService = Depends(get_document_service),
) -> IdentifierSuggestionResponse:
    """Propose the next ``<clientCode>-<projectCode>-<NN>`` display id."""
    try:
        suggestion = await service.suggest_display_id(project_id, suffix=suffix)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return IdentifierSuggestionResponse.from_suggestion(suggestion)


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    data: DocumentCreate,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """Create a document record (invoice, report or other) without a file."""
    try:
        document = await service.create_document(data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return DocumentResponse.model_validate(document, from_attributes=True)


@router.post("/upload", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    file: UploadFile = File(...),
    project_id: str = Form(...),
    name: str | None = Form(None),
    document_type: DocumentType = Form(DocumentType.OTHERS),
    display_id: str | None = Form(None),
    amount: Decimal | None = Form(None, ge=0, max_digits=12, decimal_places=2),
    paid: bool | None = Form(None),
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """Upload a file and attach it to a project as a new document.

    amount/paid are recorded for invoices and ignored for other types.
    """
    content = await file.read()
    try:
        document = await service.upload_document(
            project_id=project_id,
            content=content,
            filename=file.filename or "unnamed",
            content_type=file.content_type,
            name=name,
            document_type=document_type,
            display_id=(display_id or "").strip() or None,
            amount=amount,
            paid=paid,
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidUploadError as e:
        logger.warning("Rejected upload '%s' for project %s: %s", file.filename, project_id, e.message)
        code = (
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
            if e.too_large
            else status.HTTP_400_BAD_REQUEST
        )
        raise HTTPException(status_code=code, detail=e.message)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return DocumentResponse.model_validate(document, from_attributes=True)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """Retrieve a single document."""
    try:
        document = await service.get_document(document_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DocumentResponse.model_validate(document, from_attributes=True)


@router.get("/{document_id}/download")
async def download_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> FileResponse:
    """Stream the stored file, named after the document."""
    try:
        document, path = await service.get_download(document_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return FileResponse(
        path=str(path),
        filename=document.name,
        media_type=document.mime_type or "application/octet-stream",
    )


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: str,
    data: DocumentUpdate,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """Update a document. amount/paid only stick on invoices."""
    try:
        document = await service.update_document(document_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return DocumentResponse.model_validate(document, from_attributes=True)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
    session: AsyncSession = Depends(get_db_session),
) -> None:
    """Delete a document and its stored file."""
    try:
        document = await service.delete_document(document_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    # The row must be gone for good before its file is removed
    await session.commit()
    await service.discard_file(document)
