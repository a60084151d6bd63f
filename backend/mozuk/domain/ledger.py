"""Invoice ledger aggregation — invoiced, collected and outstanding totals.

Only ``INVOICE`` documents participate. Amounts are accumulated as
cent-quantized ``Decimal`` values so that sums are exact.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Protocol

from mozuk.domain.entities.document import DocumentType
from mozuk.domain.formatting import MONEY_CONTEXT, ZERO, to_money

ALL = "all"


class LedgerDocument(Protocol):
    """The document fields the ledger reads."""

    project_id: str
    document_type: DocumentType | str
    amount: object
    paid: bool | None


@dataclass(frozen=True)
class Ledger:
    """Monetary summary over a set of invoices."""

    total_invoiced: Decimal = ZERO
    total_collected: Decimal = ZERO
    invoice_count: int = 0
    collected_count: int = 0

    @property
    def outstanding(self) -> Decimal:
        # Not clamped: a negative value signals inconsistent upstream data.
        with localcontext(MONEY_CONTEXT):
            return self.total_invoiced - self.total_collected

    @property
    def outstanding_count(self) -> int:
        return self.invoice_count - self.collected_count

    @classmethod
    def empty(cls) -> "Ledger":
        return cls()

    def add(self, document: LedgerDocument) -> "Ledger":
        """Return a new ledger including one invoice."""
        amount = to_money(document.amount)
        collected = document.paid is True
        with localcontext(MONEY_CONTEXT):
            return Ledger(
                total_invoiced=self.total_invoiced + amount,
                total_collected=self.total_collected + (amount if collected else ZERO),
                invoice_count=self.invoice_count + 1,
                collected_count=self.collected_count + (1 if collected else 0),
            )

    def __add__(self, other: "Ledger") -> "Ledger":
        if not isinstance(other, Ledger):
            return NotImplemented
        with localcontext(MONEY_CONTEXT):
            return Ledger(
                total_invoiced=self.total_invoiced + other.total_invoiced,
                total_collected=self.total_collected + other.total_collected,
                invoice_count=self.invoice_count + other.invoice_count,
                collected_count=self.collected_count + other.collected_count,
            )


def is_invoice(document: LedgerDocument) -> bool:
    # DocumentType is a str enum, so raw "INVOICE" strings compare equal too
    return document.document_type == DocumentType.INVOICE


def aggregate(documents: Iterable[LedgerDocument], scope: str = ALL) -> Ledger:
    """Sum invoices globally (``scope=ALL``) or for a single parent id."""
    ledger = Ledger.empty()
    for document in documents:
        if not is_invoice(document):
            continue
        if scope != ALL and document.project_id != scope:
            continue
        ledger = ledger.add(document)
    return ledger


def aggregate_by_parent(documents: Iterable[LedgerDocument]) -> dict[str, Ledger]:
    """Group invoices by parent (project) id in a single pass."""
    ledgers: dict[str, Ledger] = {}
    for document in documents:
        if not is_invoice(document):
            continue
        current = ledgers.get(document.project_id, Ledger.empty())
        ledgers[document.project_id] = current.add(document)
    return ledgers
