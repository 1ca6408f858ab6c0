"""
Response normalizer: turns free-form model text into schema-valid payloads.

Shape repair strips code fences and stray prose, parses JSON, applies any
legacy-shape mapping and validates into the endpoint's pydantic model. Any
failure along the way is answered with the endpoint's fallback, so
``repair_response`` never raises for bad model output.

Quantity enforcement (questions only) pads with the synthetic template or
keeps a prefix so the list has exactly the requested length, then renumbers
ids ``q1..qN``.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, Literal, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from sahayak.core.errors import MalformedResponseError
from sahayak.models.questions import QuestionItem, QuestionSet
from sahayak.services.fallbacks import question_set_fallback, synthetic_question

logger = logging.getLogger("sahayak.normalizer")

M = TypeVar("M", bound=BaseModel)
Envelope = Optional[Literal["object", "array"]]

# Opening fence with an optional language tag, or a bare closing fence
_FENCE_RE = re.compile(r"```(?:[A-Za-z0-9_+-]+(?=\s))?")

_ENVELOPE_CHARS = {"object": ("{", "}"), "array": ("[", "]")}


def clean_json_response(content: str, envelope: Envelope = "object") -> str:
    """Strip markdown fences and prose around the JSON body."""
    content = _FENCE_RE.sub("", (content or "").strip()).strip()
    if envelope is None:
        return content

    open_ch, close_ch = _ENVELOPE_CHARS[envelope]
    start = content.find(open_ch)
    end = content.rfind(close_ch)
    if start != -1 and end > start:
        content = content[start:end + 1]
    return content


def parse_model_json(raw: str, envelope: Envelope = "object") -> Any:
    """Parse cleaned model output, raising MalformedResponseError on failure.

    A declared envelope also fixes the top-level JSON type.
    """
    cleaned = clean_json_response(raw, envelope)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"invalid JSON: {e.msg} at pos {e.pos}") from e
    except (ValueError, RecursionError) as e:
        # over-long integer literals, nesting deeper than the recursion limit
        raise MalformedResponseError(f"invalid JSON: {e.__class__.__name__}") from e

    if envelope == "object" and not isinstance(data, dict):
        raise MalformedResponseError(f"expected a JSON object, got {type(data).__name__}")
    if envelope == "array" and not isinstance(data, list):
        raise MalformedResponseError(f"expected a JSON array, got {type(data).__name__}")
    return data


def repair_response(
    raw: str,
    schema: type[M],
    fallback: Callable[[], dict],
    *,
    envelope: Envelope = "object",
    adapt: Optional[Callable[[Any], Any]] = None,
    label: Optional[str] = None,
) -> M:
    """Best-effort conversion of ``raw`` into ``schema``.

    ``adapt`` runs on the parsed value before validation (legacy mappings,
    quantity enforcement). ``fallback`` is only called when something fails.
    """
    label = label or schema.__name__

    try:
        data = parse_model_json(raw, envelope)
    except MalformedResponseError as e:
        logger.warning("[normalizer.%s] unparseable model output, using fallback: %s", label, e)
        return schema.model_validate(fallback())

    if adapt is not None:
        try:
            data = adapt(data)
        except Exception as e:
            logger.warning("[normalizer.%s] adapt step failed, using fallback: %s", label, e)
            return schema.model_validate(fallback())

    try:
        return schema.model_validate(data)
    except SchemaError as e:
        logger.warning(
            "[normalizer.%s] output does not fit schema (%d errors), using fallback",
            label, e.error_count(),
        )
        return schema.model_validate(fallback())


# ---------------------------------------------------------------------------
# Quantity enforcement
# ---------------------------------------------------------------------------

def coerce_target_count(value: Any) -> Optional[int]:
    """Requested question count, or None when enforcement must be skipped.

    Accepts non-negative ints, integral floats and digit strings. Booleans,
    negatives and anything non-numeric disable enforcement.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float):
        return int(value) if value.is_integer() and value >= 0 else None
    if isinstance(value, str):
        s = value.strip()
        if s.isascii() and s.isdigit():
            return int(s)
    return None


def enforce_question_count(data: dict, n: int) -> dict:
    """Force ``data["questions"]`` to exactly ``n`` items. Mutates ``data``."""
    questions = [q for q in data.get("questions") or [] if isinstance(q, dict)]
    actual = len(questions)

    if actual < n:
        logger.warning("[normalizer.questions] model returned %d of %d questions, padding", actual, n)
        questions += [synthetic_question(k) for k in range(actual + 1, n + 1)]
    elif actual > n:
        logger.warning("[normalizer.questions] model returned %d of %d questions, trimming", actual, n)
        questions = questions[:n]

    # Re-number IDs
    for i, q in enumerate(questions):
        q["id"] = f"q{i + 1}"

    data["questions"] = questions
    data["totalCount"] = n
    return data


def _keep_valid_questions(items: list) -> list[dict]:
    kept = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            QuestionItem.model_validate(item)
        except SchemaError:
            continue
        kept.append(item)
    if len(kept) != len(items):
        logger.info("[normalizer.questions] dropped %d unusable items", len(items) - len(kept))
    return kept


def normalize_question_set(raw: str, target: Optional[int]) -> QuestionSet:
    """Shape repair plus quantity enforcement for generated questions.

    With ``target`` None the model's count is kept and ``totalCount``
    reports it.
    """

    def adapt(data: dict) -> dict:
        questions = data.get("questions")
        if not isinstance(questions, list):
            raise MalformedResponseError("missing questions list")
        data["questions"] = _keep_valid_questions(questions)
        if target is None:
            data["totalCount"] = len(data["questions"])
            return data
        return enforce_question_count(data, target)

    return repair_response(
        raw,
        QuestionSet,
        lambda: question_set_fallback(target),
        adapt=adapt,
        label="questions",
    )
