"""Project CRUD, display-id suggestion and ledger endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from mozuk.application.schemas.document import DocumentResponse
from mozuk.application.schemas.ledger import IdentifierSuggestionResponse, LedgerResponse
from mozuk.application.schemas.project import (
    ClientSummary,
    ProjectCreate,
    ProjectDetailResponse,
    ProjectListItem,
    ProjectResponse,
    ProjectUpdate,
)
from mozuk.application.services import LedgerService, ProjectService
from mozuk.config import get_settings
from mozuk.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from mozuk.infrastructure.dependencies import (
    get_current_user,
    get_ledger_service,
    get_project_service,
)

router = APIRouter(
    prefix="/projects",
    tags=["Projects"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[ProjectListItem])
async def list_projects(
    client_id: str | None = Query(None, description="Filter by client ID"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectListItem]:
    """List projects, newest first, with client summary and document count."""
    rows = await service.list_projects(client_id=client_id, skip=skip, limit=limit)
    return [
        ProjectListItem.model_validate(project, from_attributes=True).model_copy(
            update={
                "client": ClientSummary.model_validate(client, from_attributes=True)
                if client
                else None,
                "document_count": count,
            }
        )
        for project, client, count in rows
    ]


@router.get("/next-id", response_model=IdentifierSuggestionResponse)
async def suggest_project_id(
    client_id: str = Query(..., description="Client the new project belongs to"),
    suffix: str | None = Query(
        None, pattern=r"^[0-9]*$", description="User-edited numeric suffix to compose as-is"
    ),
    service: ProjectService = Depends(get_project_service),
) -> IdentifierSuggestionResponse:
    """Propose the next ``<clientCode>-<NNN>`` display id for a new project."""
    try:
        suggestion = await service.suggest_display_id(client_id, suffix=suffix)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return IdentifierSuggestionResponse.from_suggestion(suggestion)


@router.get("/{project_id}", response_model=ProjectDetailResponse)
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ProjectDetailResponse:
    """Retrieve a project with its client summary and documents."""
    try:
        project, client, documents = await service.get_project_detail(project_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProjectDetailResponse.model_validate(project, from_attributes=True).model_copy(
        update={
            "client": ClientSummary.model_validate(client, from_attributes=True)
            if client
            else None,
            "documents": [
                DocumentResponse.model_validate(d, from_attributes=True) for d in documents
            ],
        }
    )


@router.get("/{project_id}/ledger", response_model=LedgerResponse)
async def get_project_ledger(
    project_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerResponse:
    """Invoiced, collected and outstanding totals for one project."""
    try:
        ledger = await service.project_ledger(project_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return LedgerResponse.from_ledger(ledger, get_settings().currency_symbol)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Create a new project."""
    try:
        project = await service.create_project(data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Update an existing project."""
    try:
        project = await service.update_project(project_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ProjectResponse.model_validate(project, from_attributes=True)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> None:
    """Delete a project together with its documents."""
    try:
        await service.delete_project(project_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
