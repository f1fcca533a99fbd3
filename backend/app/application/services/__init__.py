from .client_service import ClientService
from .matter_service import MatterService
from .timekeeper_service import TimekeeperService
from .time_entry_service import TimeEntryService
from .matter_rate_service import MatterRateService
from .billing_service import BillingService, resolve_effective_rate
from .invoice_service import InvoiceService, render_invoice_text

__all__ = [
    "ClientService",
    "MatterService",
    "TimekeeperService",
    "TimeEntryService",
    "MatterRateService",
    "BillingService",
    "resolve_effective_rate",
    "InvoiceService",
    "render_invoice_text",
]
