import time

from fastapi import APIRouter, Depends

from sahayak.models.common import ApiResponse, ResponseMetadata
from sahayak.models.passage import PassageRequest, ReadingPassage
from sahayak.services.generation import GenerationService, get_generation_service
from sahayak.services.telemetry import instrument

router = APIRouter(prefix="/api", tags=["passages"])


@router.post("/generate-passage", response_model=ApiResponse[ReadingPassage],
             response_model_exclude_none=True)
@instrument(route="/api/generate-passage", version="v1")
async def generate_passage(
    request: PassageRequest,
    service: GenerationService = Depends(get_generation_service),
):
    t0 = time.time()
    passage = await service.passage(request)
    return ApiResponse[ReadingPassage](success=True, data=passage, metadata=ResponseMetadata.since(t0))
