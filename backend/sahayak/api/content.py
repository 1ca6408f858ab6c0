import time

from fastapi import APIRouter, Depends

from sahayak.models.common import ApiResponse, ResponseMetadata
from sahayak.models.content import ContentBundle, ContentRequest, ExampleSet, ExamplesRequest
from sahayak.services.generation import GenerationService, get_generation_service
from sahayak.services.telemetry import instrument

router = APIRouter(prefix="/api", tags=["content"])


@router.post("/generate-content", response_model=ApiResponse[ContentBundle],
             response_model_exclude_none=True)
@instrument(route="/api/generate-content", version="v1")
async def generate_content(
    request: ContentRequest,
    service: GenerationService = Depends(get_generation_service),
):
    t0 = time.time()
    bundle = await service.localized_content(request)
    return ApiResponse[ContentBundle](success=True, data=bundle, metadata=ResponseMetadata.since(t0))


@router.post("/generate-examples", response_model=ApiResponse[ExampleSet],
             response_model_exclude_none=True)
@instrument(route="/api/generate-examples", version="v1")
async def generate_examples(
    request: ExamplesRequest,
    service: GenerationService = Depends(get_generation_service),
):
    t0 = time.time()
    examples = await service.example_prompts(request)
    return ApiResponse[ExampleSet](success=True, data=examples, metadata=ResponseMetadata.since(t0))
