"""Prompt templates for question generation.

When a count is requested the example payload carries exactly that many
items, so the instruction grows with the count.
"""
import json
from typing import Optional

QUESTIONS_PROMPT = """You are Sahayak, an AI teaching assistant for Indian classrooms.

{count_instruction}

Grade Level: {grade_level}
Subject: {subject}
Question Types: {question_types}
Skills to Assess: {skills}

Base every question on this text:
"{text}"

Use Indian names, places and cultural references. Each question needs a unique id
(q1, q2, ...).

Respond with ONLY a JSON object in exactly this format:
{example_payload}
{count_reminder}"""

_EXAMPLE_ANSWERS = ("Option A", "Option B", "Option C", "Option D")


def _example_item(k: int) -> dict:
    return {
        "id": f"q{k}",
        "type": "multipleChoice",
        "question": f"Question {k} with Indian cultural context",
        "options": list(_EXAMPLE_ANSWERS),
        "correctAnswer": _EXAMPLE_ANSWERS[(k - 1) % len(_EXAMPLE_ANSWERS)],
        "points": 2,
        "skill": "Reading Comprehension",
        "difficulty": "medium",
        "culturalContext": "How this question relates to Indian culture",
    }


def render_example_payload(count: Optional[int]) -> str:
    """Example JSON body with ``count`` items, or one item when count is None."""
    n = 1 if count is None else count
    payload = {
        "questions": [_example_item(k) for k in range(1, n + 1)],
        "totalCount": n,
    }
    return json.dumps(payload, indent=2)


def _joined(values: list[str], default: str) -> str:
    return ", ".join(values) if values else default


def build_questions_prompt(req, count: Optional[int]) -> str:
    if count is None:
        count_instruction = "Generate a set of culturally relevant questions."
        count_reminder = ""
    else:
        count_instruction = f"Generate EXACTLY {count} culturally relevant questions."
        count_reminder = (
            f"\nThe example above shows exactly {count} questions. "
            f"Your questions array must contain exactly {count} items."
        )

    return QUESTIONS_PROMPT.format(
        count_instruction=count_instruction,
        grade_level=req.grade_level,
        subject=req.subject or "general",
        question_types=_joined(req.question_types, "mixed"),
        skills=_joined(req.skills + req.custom_skills, "mixed"),
        text=req.text,
        example_payload=render_example_payload(count),
        count_reminder=count_reminder,
    )
