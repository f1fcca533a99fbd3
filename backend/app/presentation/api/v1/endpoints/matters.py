"""Matter endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import MatterCreate, MatterResponse, MatterUpdate
from app.application.services import MatterService
from app.domain.exceptions import EntityNotFoundError, ReferentialIntegrityError
from app.infrastructure.dependencies import get_matter_service

router = APIRouter(prefix="/matters", tags=["Matters"])


@router.get("", response_model=list[MatterResponse])
async def list_matters(
    service: MatterService = Depends(get_matter_service),
) -> list[MatterResponse]:
    """All matters, newest first."""
    matters = await service.get_matters()
    return [MatterResponse.model_validate(m, from_attributes=True) for m in matters]


@router.get("/unique-clients", response_model=list[str])
async def list_unique_client_names(
    service: MatterService = Depends(get_matter_service),
) -> list[str]:
    return await service.get_unique_clients()


@router.get("/{matter_id}", response_model=MatterResponse)
async def get_matter(
    matter_id: int,
    service: MatterService = Depends(get_matter_service),
) -> MatterResponse:
    matter = await service.get_matter(matter_id)
    if matter is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Matter", matter_id)),
        )
    return MatterResponse.model_validate(matter, from_attributes=True)


@router.post("", response_model=MatterResponse, status_code=status.HTTP_201_CREATED)
async def create_matter(
    data: MatterCreate,
    service: MatterService = Depends(get_matter_service),
) -> MatterResponse:
    """Open a matter for an existing client."""
    try:
        matter = await service.create_matter(data)
    except ReferentialIntegrityError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return MatterResponse.model_validate(matter, from_attributes=True)


@router.put("/{matter_id}", response_model=MatterResponse)
async def update_matter(
    matter_id: int,
    data: MatterUpdate,
    service: MatterService = Depends(get_matter_service),
) -> MatterResponse:
    try:
        matter = await service.update_matter(matter_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MatterResponse.model_validate(matter, from_attributes=True)
