from typing import Any

from pydantic import AliasChoices, Field

from sahayak.models.common import CamelModel


class QuestionRequest(CamelModel):
    text: str | None = None
    grade_level: str | None = None
    subject: str | None = None
    # Left untyped: a missing or non-numeric count disables quantity enforcement
    num_questions: Any = None
    question_types: list[str] = []
    skills: list[str] = []
    custom_skills: list[str] = []


class QuestionItem(CamelModel):
    id: str = ""
    type: str = "multipleChoice"
    question_text: str = Field(
        default="",
        validation_alias=AliasChoices("questionText", "question", "question_text"),
    )
    options: list[str] | None = None
    correct_answer: str | None = None
    points: int = 2
    skill: str = ""
    difficulty: str = "medium"
    cultural_context: str | None = None


class QuestionSet(CamelModel):
    questions: list[QuestionItem]
    total_count: int
