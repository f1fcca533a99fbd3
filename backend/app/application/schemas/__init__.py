from .client import ClientCreate, ClientUpdate, ClientResponse, ClientSortOrder
from .matter import MatterCreate, MatterUpdate, MatterResponse
from .timekeeper import TimekeeperCreate, TimekeeperResponse
from .time_entry import (
    TimeEntryCreate,
    TimeEntryUpdate,
    TimeEntryResponse,
    TimeEntryDetailResponse,
)
from .billing import (
    MatterRateSet,
    MatterRateResponse,
    TimekeeperBillingResponse,
    BillingSummaryResponse,
    RatePreviewRequest,
    RatePreviewResponse,
    InvoiceResponse,
)

__all__ = [
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "ClientSortOrder",
    "MatterCreate",
    "MatterUpdate",
    "MatterResponse",
    "TimekeeperCreate",
    "TimekeeperResponse",
    "TimeEntryCreate",
    "TimeEntryUpdate",
    "TimeEntryResponse",
    "TimeEntryDetailResponse",
    "MatterRateSet",
    "MatterRateResponse",
    "TimekeeperBillingResponse",
    "BillingSummaryResponse",
    "RatePreviewRequest",
    "RatePreviewResponse",
    "InvoiceResponse",
]
