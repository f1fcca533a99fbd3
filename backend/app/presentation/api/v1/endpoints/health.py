"""Health check endpoint — reports settings and record counts."""

from fastapi import APIRouter, Depends

from app.application.interfaces import COLLECTIONS, RecordStore
from app.config import get_settings
from app.infrastructure.dependencies import get_record_store

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(store: RecordStore = Depends(get_record_store)) -> dict:
    """Returns the application status and the size of each collection."""
    settings = get_settings()
    counts = {name: len(await store.read_all(name)) for name in COLLECTIONS}
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "storage": settings.storage_backend,
        "records": counts,
    }
