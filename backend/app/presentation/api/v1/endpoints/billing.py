"""Matter rate override, billing summary and invoice endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from app.application.schemas import (
    BillingSummaryResponse,
    MatterRateResponse,
    MatterRateSet,
    RatePreviewRequest,
    RatePreviewResponse,
)
from app.application.services import BillingService, InvoiceService, MatterRateService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import (
    get_billing_service,
    get_invoice_service,
    get_matter_rate_service,
)

matter_rates_router = APIRouter(prefix="/matter-rates", tags=["Matter Rates"])
router = APIRouter(prefix="/billing", tags=["Billing"])


# ── Matter rate overrides ───────────────────────────────────────────


@matter_rates_router.put("", response_model=MatterRateResponse)
async def set_matter_rate(
    data: MatterRateSet,
    service: MatterRateService = Depends(get_matter_rate_service),
) -> MatterRateResponse:
    """Create or replace the override for a (matter, timekeeper) pair."""
    rate = await service.set_matter_rate(data.matter_id, data.timekeeper_id, data.override_rate)
    return MatterRateResponse.model_validate(rate, from_attributes=True)


@matter_rates_router.get("", response_model=MatterRateResponse)
async def get_matter_rate(
    matter_id: int = Query(...),
    timekeeper_id: int = Query(...),
    service: MatterRateService = Depends(get_matter_rate_service),
) -> MatterRateResponse:
    rate = await service.get_matter_rate(matter_id, timekeeper_id)
    if rate is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No rate override for matter {matter_id} / timekeeper {timekeeper_id}",
        )
    return MatterRateResponse.model_validate(rate, from_attributes=True)


@matter_rates_router.get("/matter/{matter_id}", response_model=list[MatterRateResponse])
async def list_matter_rates(
    matter_id: int,
    service: MatterRateService = Depends(get_matter_rate_service),
) -> list[MatterRateResponse]:
    rates = await service.get_matter_rates(matter_id)
    return [MatterRateResponse.model_validate(r, from_attributes=True) for r in rates]


# ── Billing ─────────────────────────────────────────────────────────


@router.post("/rate-preview", response_model=RatePreviewResponse)
async def preview_rate(
    data: RatePreviewRequest,
    service: BillingService = Depends(get_billing_service),
) -> RatePreviewResponse:
    """Rate and amount an unsaved time entry would bill at."""
    preview = await service.preview_rate(
        data.matter_id, data.timekeeper_id, data.hours, data.override_rate
    )
    return RatePreviewResponse.model_validate(preview, from_attributes=True)


@router.get("/{matter_id}/summary", response_model=BillingSummaryResponse)
async def get_billing_summary(
    matter_id: int,
    service: BillingService = Depends(get_billing_service),
) -> BillingSummaryResponse:
    summary = await service.get_billing_summary(matter_id)
    return BillingSummaryResponse.model_validate(summary, from_attributes=True)


@router.get("/{matter_id}/invoice", response_class=PlainTextResponse)
async def download_invoice(
    matter_id: int,
    issued_on: date | None = Query(None, description="Invoice date, defaults to today"),
    service: InvoiceService = Depends(get_invoice_service),
) -> PlainTextResponse:
    """Plain-text invoice as a file download."""
    try:
        invoice = await service.generate_invoice(matter_id, issued_on)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PlainTextResponse(
        invoice.content,
        headers={"Content-Disposition": f'attachment; filename="{invoice.filename}"'},
    )
