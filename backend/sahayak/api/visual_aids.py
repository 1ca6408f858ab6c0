import time

from fastapi import APIRouter, Depends

from sahayak.models.common import ApiResponse, ResponseMetadata
from sahayak.models.visual_aid import VisualAid, VisualAidRequest
from sahayak.services.generation import GenerationService, get_generation_service
from sahayak.services.telemetry import instrument

router = APIRouter(prefix="/api", tags=["visual-aids"])


@router.post("/generate-visual-aid", response_model=ApiResponse[VisualAid],
             response_model_exclude_none=True)
@instrument(route="/api/generate-visual-aid", version="v1")
async def generate_visual_aid(
    request: VisualAidRequest,
    service: GenerationService = Depends(get_generation_service),
):
    t0 = time.time()
    aid = await service.visual_aid(request)
    return ApiResponse[VisualAid](success=True, data=aid, metadata=ResponseMetadata.since(t0))
