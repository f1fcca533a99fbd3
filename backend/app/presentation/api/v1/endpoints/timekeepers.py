"""Timekeeper endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import TimekeeperCreate, TimekeeperResponse
from app.application.services import TimekeeperService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_timekeeper_service

router = APIRouter(prefix="/timekeepers", tags=["Timekeepers"])


@router.get("", response_model=list[TimekeeperResponse])
async def list_timekeepers(
    service: TimekeeperService = Depends(get_timekeeper_service),
) -> list[TimekeeperResponse]:
    """All timekeepers sorted by name."""
    timekeepers = await service.get_timekeepers()
    return [TimekeeperResponse.model_validate(t, from_attributes=True) for t in timekeepers]


@router.get("/{timekeeper_id}", response_model=TimekeeperResponse)
async def get_timekeeper(
    timekeeper_id: int,
    service: TimekeeperService = Depends(get_timekeeper_service),
) -> TimekeeperResponse:
    timekeeper = await service.get_timekeeper(timekeeper_id)
    if timekeeper is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Timekeeper", timekeeper_id)),
        )
    return TimekeeperResponse.model_validate(timekeeper, from_attributes=True)


@router.post("", response_model=TimekeeperResponse, status_code=status.HTTP_201_CREATED)
async def create_timekeeper(
    data: TimekeeperCreate,
    service: TimekeeperService = Depends(get_timekeeper_service),
) -> TimekeeperResponse:
    timekeeper = await service.create_timekeeper(data)
    return TimekeeperResponse.model_validate(timekeeper, from_attributes=True)
