"""Domain entities for computed billing results — never persisted."""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class TimekeeperBilling:
    """Billable totals for one timekeeper on one matter.

    ``rate_used`` is the effective rate of the first billable entry seen
    for this timekeeper, not an average across entries.
    """

    timekeeper_id: int
    timekeeper_name: str
    rate_used: float
    billable_hours: float = 0.0
    billable_amount: float = 0.0


@dataclass
class BillingSummary:
    """Aggregated hours and amounts for a matter. Values are unrounded."""

    matter_id: int
    total_billable_hours: float = 0.0
    total_non_billable_hours: float = 0.0
    total_billable_amount: float = 0.0
    timekeeper_breakdown: list[TimekeeperBilling] = field(default_factory=list)


@dataclass
class RatePreview:
    """Effective rate and amount for a prospective time entry."""

    rate: float
    amount: float


@dataclass
class Invoice:
    """Plain-text invoice rendered from a billing summary."""

    matter_id: int
    matter_number: str
    issued_on: date
    filename: str
    content: str
    total_amount: float
