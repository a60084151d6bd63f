"""Pydantic DTOs for ledger totals, identifier suggestions and the dashboard."""

from decimal import Decimal

from pydantic import BaseModel

from mozuk.domain.formatting import format_currency
from mozuk.domain.identifiers import IdentifierSuggestion
from mozuk.domain.ledger import Ledger


class LedgerResponse(BaseModel):
    """Invoiced / collected / outstanding totals, raw and currency-formatted."""

    total_invoiced: Decimal
    total_collected: Decimal
    outstanding: Decimal
    invoice_count: int
    collected_count: int
    outstanding_count: int
    total_invoiced_display: str
    total_collected_display: str
    outstanding_display: str

    @classmethod
    def from_ledger(cls, ledger: Ledger, currency_symbol: str = "$") -> "LedgerResponse":
        return cls(
            total_invoiced=ledger.total_invoiced,
            total_collected=ledger.total_collected,
            outstanding=ledger.outstanding,
            invoice_count=ledger.invoice_count,
            collected_count=ledger.collected_count,
            outstanding_count=ledger.outstanding_count,
            total_invoiced_display=format_currency(ledger.total_invoiced, currency_symbol),
            total_collected_display=format_currency(ledger.total_collected, currency_symbol),
            outstanding_display=format_currency(ledger.outstanding, currency_symbol),
        )


class IdentifierSuggestionResponse(BaseModel):
    """Proposed display id for a new project or document.

    ``suffix`` is the editable numeric part; the rest of ``display_id`` is
    fixed by the parent.
    """

    suffix: str
    display_id: str

    @classmethod
    def from_suggestion(cls, suggestion: IdentifierSuggestion) -> "IdentifierSuggestionResponse":
        return cls(suffix=suggestion.suffix, display_id=suggestion.display_id)


class DashboardStatsResponse(BaseModel):
    clients: int
    projects: int
    documents: int
    ledger: LedgerResponse
