import time

from fastapi import APIRouter, Depends

from sahayak.models.common import ApiResponse, ResponseMetadata
from sahayak.models.questions import QuestionRequest, QuestionSet
from sahayak.services.generation import GenerationService, get_generation_service
from sahayak.services.telemetry import instrument

router = APIRouter(prefix="/api", tags=["questions"])


@router.post("/generate-questions", response_model=ApiResponse[QuestionSet],
             response_model_exclude_none=True)
@instrument(route="/api/generate-questions", version="v1")
async def generate_questions(
    request: QuestionRequest,
    service: GenerationService = Depends(get_generation_service),
):
    """Quiz questions from a passage. With numQuestions the list has exactly that length."""
    t0 = time.time()
    questions = await service.questions(request)
    return ApiResponse[QuestionSet](success=True, data=questions, metadata=ResponseMetadata.since(t0))
