import time

from fastapi import APIRouter, Depends

from sahayak.models.common import ApiResponse, ResponseMetadata
from sahayak.models.worksheet import (
    WeeklyPlanCollection,
    WeeklyPlanRequest,
    WorksheetCollection,
    WorksheetRequest,
)
from sahayak.services.generation import GenerationService, get_generation_service
from sahayak.services.telemetry import instrument

router = APIRouter(prefix="/api", tags=["worksheets"])


@router.post("/generate-worksheets", response_model=ApiResponse[WorksheetCollection],
             response_model_exclude_none=True)
@instrument(route="/api/generate-worksheets", version="v1")
async def generate_worksheets(
    request: WorksheetRequest,
    service: GenerationService = Depends(get_generation_service),
):
    """One differentiated worksheet per target grade."""
    t0 = time.time()
    collection = await service.worksheets(request)
    return ApiResponse[WorksheetCollection](
        success=True, data=collection, metadata=ResponseMetadata.since(t0)
    )


@router.post("/generate-weekly-plan", response_model=ApiResponse[WeeklyPlanCollection],
             response_model_exclude_none=True)
@instrument(route="/api/generate-weekly-plan", version="v1")
async def generate_weekly_plan(
    request: WeeklyPlanRequest,
    service: GenerationService = Depends(get_generation_service),
):
    t0 = time.time()
    collection = await service.weekly_plans(request)
    return ApiResponse[WeeklyPlanCollection](
        success=True, data=collection, metadata=ResponseMetadata.since(t0)
    )
