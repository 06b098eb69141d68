"""
Status Controller
=================
"""
from fastapi import APIRouter, Depends

from garden_site.api.v1.dependencies import get_system_service
from garden_site.application.dto.status_dto import StatusResponse
from garden_site.application.services.system_service import SystemService

router = APIRouter(tags=["status"])


@router.get(
    "",
    response_model=StatusResponse,
    summary="Liveness and storage connectivity",
    description="Always 200; ``database`` reports whether MongoDB answers a ping.",
)
async def get_status(
    service: SystemService = Depends(get_system_service),
) -> StatusResponse:
    return StatusResponse(**await service.status())
