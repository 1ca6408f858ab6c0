"""
Prompt dispatcher: one coroutine per content type.

Each method checks required fields, builds the prompt, makes the completion
call(s) through ``AIService`` and hands the raw text to the normalizer.
Required-field checks always run before any outbound call.
"""
from __future__ import annotations

import logging
import uuid
from typing import Optional

from sahayak.core.config import Settings, get_settings
from sahayak.core.errors import MalformedResponseError, ValidationError, require_fields
from sahayak.models.content import ContentBundle, ContentRequest, ExampleSet, ExamplesRequest
from sahayak.models.knowledge import KnowledgeBundle, KnowledgeRequest
from sahayak.models.passage import PassageRequest, ReadingPassage
from sahayak.models.questions import QuestionRequest, QuestionSet
from sahayak.models.visual_aid import VisualAid, VisualAidRequest
from sahayak.models.worksheet import (
    WeeklyPlan,
    WeeklyPlanCollection,
    WeeklyPlanRequest,
    Worksheet,
    WorksheetCollection,
    WorksheetRequest,
)
from sahayak.prompts.content import build_content_prompt, build_examples_prompt
from sahayak.prompts.knowledge import build_knowledge_prompt
from sahayak.prompts.passage import build_passage_prompt
from sahayak.prompts.questions import build_questions_prompt
from sahayak.prompts.visual_aid import build_visual_aid_prompt
from sahayak.prompts.worksheets import build_weekly_plan_prompt, build_worksheet_prompt, grade_profile
from sahayak.services.ai import AIService, get_ai_service
from sahayak.services.fallbacks import (
    content_fallback,
    convert_legacy_knowledge,
    examples_fallback,
    knowledge_fallback,
    passage_fallback,
    visual_aid_fallback,
    weekly_plan_fallback,
    worksheet_fallback,
)
from sahayak.services.normalizer import coerce_target_count, normalize_question_set, repair_response

logger = logging.getLogger("sahayak.generation")


def fill_exercise_defaults(data: dict, grade: str, difficulty: str) -> dict:
    """Backfill per-exercise defaults the model tends to omit."""
    exercises = data.get("exercises")
    if not isinstance(exercises, list):
        raise MalformedResponseError("missing exercises list")

    filled = []
    for i, ex in enumerate(exercises):
        if not isinstance(ex, dict):
            continue
        filled.append({
            "id": ex.get("id") or f"ex{i + 1}",
            "type": ex.get("type") or "shortAnswer",
            "question": ex.get("question") or f"Question {i + 1}",
            "options": ex.get("options") or [],
            "correctAnswer": ex.get("correctAnswer") or "Sample answer",
            "points": ex.get("points") or 2,
            "hint": ex.get("hint") or "",
        })
    data["exercises"] = filled
    data.setdefault("grade", grade)
    data.setdefault("difficulty", difficulty)
    return data


class GenerationService:
    def __init__(self, ai: AIService, settings: Optional[Settings] = None):
        self.ai = ai
        self.settings = settings or get_settings()

    # ── Localized content ────────────────────────────────────────────────

    async def localized_content(self, req: ContentRequest) -> ContentBundle:
        require_fields(req, "description", "language", "grade")
        raw = await self.ai.generate(build_content_prompt(req))
        return repair_response(raw, ContentBundle, lambda: content_fallback(req, raw), label="content")

    async def example_prompts(self, req: ExamplesRequest) -> ExampleSet:
        require_fields(req, "grade", "subject")
        raw = await self.ai.generate(build_examples_prompt(req))
        return repair_response(raw, ExampleSet, lambda: examples_fallback(req), label="examples")

    # ── Questions ────────────────────────────────────────────────────────

    def _target_count(self, req: QuestionRequest) -> Optional[int]:
        target = coerce_target_count(req.num_questions)
        if target is None:
            if req.num_questions is not None:
                logger.warning(
                    "[generation.questions] ignoring unusable numQuestions=%r", req.num_questions
                )
            return None
        if target > self.settings.max_questions:
            raise ValidationError(
                ["numQuestions"],
                f"numQuestions must be at most {self.settings.max_questions}",
            )
        return target

    async def questions(self, req: QuestionRequest) -> QuestionSet:
        require_fields(req, "text", "grade_level")
        target = self._target_count(req)
        raw = await self.ai.generate(build_questions_prompt(req, target))
        return normalize_question_set(raw, target)

    # ── Knowledge base ───────────────────────────────────────────────────

    async def explain(self, req: KnowledgeRequest) -> KnowledgeBundle:
        require_fields(req, "question")
        raw = await self.ai.generate(build_knowledge_prompt(req))

        def adapt(data):
            converted = convert_legacy_knowledge(data, req)
            if converted is not data:
                logger.info("[generation.knowledge] converted legacy answer-shaped response")
            return converted

        return repair_response(
            raw, KnowledgeBundle, lambda: knowledge_fallback(req), adapt=adapt, label="knowledge"
        )

    # ── Worksheets and weekly plans ──────────────────────────────────────

    async def worksheets(self, req: WorksheetRequest) -> WorksheetCollection:
        require_fields(req, "analyzed_content", "target_grades")
        analyzed = req.analyzed_content

        worksheets: list[Worksheet] = []
        for grade in req.target_grades:
            difficulty, _, exercise_count = grade_profile(grade)
            raw = await self.ai.generate(build_worksheet_prompt(analyzed, grade, req.question_types))
            worksheets.append(repair_response(
                raw,
                Worksheet,
                lambda: worksheet_fallback(grade, analyzed.topic, difficulty, exercise_count),
                adapt=lambda data: fill_exercise_defaults(data, grade, difficulty),
                label=f"worksheet[{grade}]",
            ))

        return WorksheetCollection(
            worksheets=worksheets,
            total_generated=len(worksheets),
            target_grades=req.target_grades,
        )

    async def weekly_plans(self, req: WeeklyPlanRequest) -> WeeklyPlanCollection:
        require_fields(req, "analyzed_content", "target_grades")
        analyzed = req.analyzed_content

        plans: list[WeeklyPlan] = []
        for week in range(1, req.number_of_weeks + 1):
            prompt = build_weekly_plan_prompt(analyzed, req.target_grades, week, req.number_of_weeks)
            raw = await self.ai.generate(prompt)
            plans.append(repair_response(
                raw,
                WeeklyPlan,
                lambda: weekly_plan_fallback(week, analyzed.topic),
                label=f"weekly_plan[{week}]",
            ))

        return WeeklyPlanCollection(
            weekly_plans=plans,
            total_weeks=len(plans),
            target_grades=req.target_grades,
        )

    # ── Visual aids and passages ─────────────────────────────────────────

    async def visual_aid(self, req: VisualAidRequest) -> VisualAid:
        if not req.subject_text.strip():
            raise ValidationError(
                ["description"],
                "Missing required fields: description (or topic, concept)",
            )
        raw = await self.ai.generate(build_visual_aid_prompt(req))

        def adapt(data: dict) -> dict:
            if not data.get("id"):
                data["id"] = f"visual-aid-{uuid.uuid4().hex[:12]}"
            return data

        return repair_response(
            raw, VisualAid, lambda: visual_aid_fallback(req), adapt=adapt, label="visual_aid"
        )

    async def passage(self, req: PassageRequest) -> ReadingPassage:
        require_fields(req, "grade", "subject")
        raw = await self.ai.generate(build_passage_prompt(req))
        return repair_response(raw, ReadingPassage, lambda: passage_fallback(req), label="passage")


def get_generation_service() -> GenerationService:
    return GenerationService(get_ai_service())
