"""Renders the plain-text invoice for a matter from its billing summary."""

import logging
from datetime import date

from app.application.services.billing_service import BillingService
from app.application.services.matter_service import MatterService
from app.domain.entities import BillingSummary, Invoice, Matter
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

_RULE = "---"


def _money(value: float) -> str:
    return f"${value:.2f}"


def render_invoice_text(matter: Matter, summary: BillingSummary, issued_on: date) -> str:
    """Build the invoice body. All figures are formatted to two decimals."""
    lines = [
        "LEGAL SERVICES INVOICE",
        "",
        f"Client: {matter.client_name}",
        f"Matter: {matter.matter_number}",
        f"Description: {matter.description}",
        f"Date: {issued_on.month}/{issued_on.day}/{issued_on.year}",
        "",
        _RULE,
        "",
        "BILLING SUMMARY:",
        f"Total Billable Hours: {summary.total_billable_hours:.2f}",
        f"Total Non-Billable Hours: {summary.total_non_billable_hours:.2f}",
        "",
        "TIMEKEEPER BREAKDOWN:",
    ]
    for row in summary.timekeeper_breakdown:
        lines.append(
            f"{row.timekeeper_name}: {row.billable_hours:.2f} hrs "
            f"@ {_money(row.rate_used)}/hr = {_money(row.billable_amount)}"
        )
    lines += [
        "",
        _RULE,
        "",
        f"TOTAL AMOUNT DUE: {_money(summary.total_billable_amount)}",
    ]
    return "\n".join(lines) + "\n"


class InvoiceService:
    def __init__(self, matter_service: MatterService, billing_service: BillingService):
        self._matters = matter_service
        self._billing = billing_service

    async def generate_invoice(self, matter_id: int, issued_on: date | None = None) -> Invoice:
        matter = await self._matters.get_matter(matter_id)
        if matter is None:
            raise EntityNotFoundError("Matter", matter_id)

        issued_on = issued_on or date.today()
        summary = await self._billing.get_billing_summary(matter_id)
        invoice = Invoice(
            matter_id=matter_id,
            matter_number=matter.matter_number,
            issued_on=issued_on,
            filename=f"invoice-{matter.matter_number}-{issued_on.isoformat()}.txt",
            content=render_invoice_text(matter, summary, issued_on),
            total_amount=summary.total_billable_amount,
        )
        logger.info("Generated invoice %s for matter id=%d", invoice.filename, matter_id)
        return invoice
