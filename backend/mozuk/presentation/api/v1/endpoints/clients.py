"""Client CRUD and financial summary endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from mozuk.application.schemas.client import (
    ClientCreate,
    ClientDetailResponse,
    ClientFinancialsResponse,
    ClientListItem,
    ClientResponse,
    ClientUpdate,
    ProjectFinancials,
)
from mozuk.application.schemas.ledger import LedgerResponse
from mozuk.application.schemas.project import ProjectResponse
from mozuk.application.services import ClientService, LedgerService
from mozuk.config import get_settings
from mozuk.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from mozuk.infrastructure.dependencies import (
    get_client_service,
    get_current_user,
    get_ledger_service,
)

router = APIRouter(
    prefix="/clients",
    tags=["Clients"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[ClientListItem])
async def list_clients(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: ClientService = Depends(get_client_service),
) -> list[ClientListItem]:
    """List clients, newest first, with their project counts."""
    rows = await service.list_clients(skip=skip, limit=limit)
    return [
        ClientListItem.model_validate(client, from_attributes=True).model_copy(
            update={"project_count": count}
        )
        for client, count in rows
    ]


@router.get("/{client_id}", response_model=ClientDetailResponse)
async def get_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> ClientDetailResponse:
    """Retrieve a client together with its projects."""
    try:
        client, projects = await service.get_client_with_projects(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientDetailResponse.model_validate(client, from_attributes=True).model_copy(
        update={
            "projects": [
                ProjectResponse.model_validate(p, from_attributes=True) for p in projects
            ]
        }
    )


@router.get("/{client_id}/financials", response_model=ClientFinancialsResponse)
async def get_client_financials(
    client_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> ClientFinancialsResponse:
    """Invoiced, collected and outstanding totals per project and overall."""
    symbol = get_settings().currency_symbol
    try:
        financials = await service.client_financials(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ClientFinancialsResponse(
        client_id=financials.client_id,
        projects=[
            ProjectFinancials(
                project_id=project.id,
                display_id=project.display_id,
                name=project.name,
                ledger=LedgerResponse.from_ledger(ledger, symbol),
            )
            for project, ledger in financials.projects
        ],
        total=LedgerResponse.from_ledger(financials.total, symbol),
    )


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: ClientCreate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Create a new client."""
    try:
        client = await service.create_client(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ClientResponse.model_validate(client, from_attributes=True)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    data: ClientUpdate,
    service: ClientService = Depends(get_client_service),
) -> ClientResponse:
    """Update an existing client."""
    try:
        client = await service.update_client(client_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ClientResponse.model_validate(client, from_attributes=True)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service),
) -> None:
    """Delete a client together with its projects and documents."""
    try:
        await service.delete_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
