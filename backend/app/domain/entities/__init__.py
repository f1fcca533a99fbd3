from .client import Client
from .matter import Matter, MatterStatus
from .timekeeper import RateTier, Timekeeper
from .time_entry import UNKNOWN, TimeEntry, TimeEntryDetail
from .matter_rate import MatterRate
from .billing import BillingSummary, Invoice, RatePreview, TimekeeperBilling

__all__ = [
    "Client",
    "Matter",
    "MatterStatus",
    "RateTier",
    "Timekeeper",
    "UNKNOWN",
    "TimeEntry",
    "TimeEntryDetail",
    "MatterRate",
    "BillingSummary",
    "Invoice",
    "RatePreview",
    "TimekeeperBilling",
]
