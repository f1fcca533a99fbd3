"""Time entry endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    TimeEntryCreate,
    TimeEntryDetailResponse,
    TimeEntryResponse,
    TimeEntryUpdate,
)
from app.application.services import TimeEntryService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_time_entry_service

router = APIRouter(prefix="/time-entries", tags=["Time Entries"])


@router.get("", response_model=list[TimeEntryDetailResponse])
async def list_time_entries(
    matter_id: int | None = Query(None, description="Only entries for this matter"),
    service: TimeEntryService = Depends(get_time_entry_service),
) -> list[TimeEntryDetailResponse]:
    """Entries joined with timekeeper and matter names, latest work date first."""
    entries = await service.get_time_entries(matter_id)
    return [TimeEntryDetailResponse.model_validate(e, from_attributes=True) for e in entries]


@router.get("/{entry_id}", response_model=TimeEntryResponse)
async def get_time_entry(
    entry_id: int,
    service: TimeEntryService = Depends(get_time_entry_service),
) -> TimeEntryResponse:
    entry = await service.get_time_entry(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("TimeEntry", entry_id)),
        )
    return TimeEntryResponse.model_validate(entry, from_attributes=True)


@router.post("", response_model=TimeEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_time_entry(
    data: TimeEntryCreate,
    service: TimeEntryService = Depends(get_time_entry_service),
) -> TimeEntryResponse:
    entry = await service.create_time_entry(data)
    return TimeEntryResponse.model_validate(entry, from_attributes=True)


@router.put("/{entry_id}", response_model=TimeEntryResponse)
async def update_time_entry(
    entry_id: int,
    data: TimeEntryUpdate,
    service: TimeEntryService = Depends(get_time_entry_service),
) -> TimeEntryResponse:
    try:
        entry = await service.update_time_entry(entry_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return TimeEntryResponse.model_validate(entry, from_attributes=True)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_time_entry(
    entry_id: int,
    service: TimeEntryService = Depends(get_time_entry_service),
) -> None:
    try:
        await service.delete_time_entry(entry_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
