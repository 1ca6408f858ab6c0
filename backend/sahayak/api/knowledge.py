import time

from fastapi import APIRouter, Depends

from sahayak.models.common import ApiResponse, ResponseMetadata
from sahayak.models.knowledge import KnowledgeBundle, KnowledgeRequest
from sahayak.services.generation import GenerationService, get_generation_service
from sahayak.services.telemetry import instrument

router = APIRouter(prefix="/api", tags=["knowledge"])


@router.post("/ask-question", response_model=ApiResponse[KnowledgeBundle],
             response_model_exclude_none=True)
@instrument(route="/api/ask-question", version="v1")
async def ask_question(
    request: KnowledgeRequest,
    service: GenerationService = Depends(get_generation_service),
):
    t0 = time.time()
    bundle = await service.explain(request)
    return ApiResponse[KnowledgeBundle](success=True, data=bundle, metadata=ResponseMetadata.since(t0))
