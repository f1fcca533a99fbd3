"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.clients import router as clients_router
from app.presentation.api.v1.endpoints.matters import router as matters_router
from app.presentation.api.v1.endpoints.timekeepers import router as timekeepers_router
from app.presentation.api.v1.endpoints.time_entries import router as time_entries_router
from app.presentation.api.v1.endpoints.billing import (
    matter_rates_router,
    router as billing_router,
)

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(clients_router)
router.include_router(matters_router)
router.include_router(timekeepers_router)
router.include_router(time_entries_router)
router.include_router(matter_rates_router)
router.include_router(billing_router)
