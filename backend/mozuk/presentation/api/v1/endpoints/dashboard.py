"""Dashboard statistics endpoint."""

from fastapi import APIRouter, Depends

from mozuk.application.schemas.ledger import DashboardStatsResponse, LedgerResponse
from mozuk.application.services import LedgerService
from mozuk.config import get_settings
from mozuk.infrastructure.dependencies import get_current_user, get_ledger_service

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(
    service: LedgerService = Depends(get_ledger_service),
) -> DashboardStatsResponse:
    """Entity counts and the ledger across all invoices."""
    stats = await service.dashboard()
    return DashboardStatsResponse(
        clients=stats.clients,
        projects=stats.projects,
        documents=stats.documents,
        ledger=LedgerResponse.from_ledger(stats.ledger, get_settings().currency_symbol),
    )
