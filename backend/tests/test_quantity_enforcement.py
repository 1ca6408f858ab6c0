"""
Tests for question quantity enforcement: padding, truncation, renumbering.
"""
import copy
import json

import pytest

from sahayak.services.fallbacks import SYNTHETIC_OPTIONS, synthetic_question
from sahayak.services.normalizer import (
    coerce_target_count,
    enforce_question_count,
    normalize_question_set,
)

TEMPLATE_FIELDS = ("type", "options", "correct_answer", "points", "skill", "difficulty")


def _model_question(i: int) -> dict:
    return {
        "id": f"model-{i}",
        "type": "shortAnswer",
        "question": f"Who lit diyas in story {i}?",
        "correctAnswer": "Meera",
        "points": 3,
        "skill": "Recall",
        "difficulty": "easy",
    }


def _raw(count: int, total=None) -> str:
    return json.dumps({
        "questions": [_model_question(i) for i in range(1, count + 1)],
        "totalCount": count if total is None else total,
    })


# ── coerce_target_count ───────────────────────────────────────────────────────

class TestCoerceTargetCount:
    @pytest.mark.parametrize("value,expected", [
        (5, 5),
        (0, 0),
        ("7", 7),
        (" 3 ", 3),
        (4.0, 4),
    ])
    def test_usable_counts(self, value, expected):
        assert coerce_target_count(value) == expected

    @pytest.mark.parametrize("value", [
        None, True, False, -1, "-2", "abc", "", "3.5", 2.5, float("nan"), float("inf"),
        "٣", [3], {"n": 3},
    ])
    def test_unusable_counts_skip_enforcement(self, value):
        assert coerce_target_count(value) is None


# ── enforce_question_count ────────────────────────────────────────────────────

class TestEnforceQuestionCount:
    @pytest.mark.parametrize("actual", range(0, 7))
    @pytest.mark.parametrize("n", range(0, 7))
    def test_converges_to_requested_count(self, actual, n):
        data = json.loads(_raw(actual))
        enforce_question_count(data, n)
        assert len(data["questions"]) == n
        assert data["totalCount"] == n
        assert [q["id"] for q in data["questions"]] == [f"q{i + 1}" for i in range(n)]

    def test_zero_empties_list(self):
        data = json.loads(_raw(4))
        enforce_question_count(data, 0)
        assert data["questions"] == []
        assert data["totalCount"] == 0

    def test_padding_continues_numbering(self):
        data = json.loads(_raw(2))
        enforce_question_count(data, 4)
        assert data["questions"][2] == synthetic_question(3)
        assert data["questions"][3] == synthetic_question(4)

    def test_is_idempotent(self):
        data = json.loads(_raw(3))
        enforce_question_count(data, 5)
        snapshot = copy.deepcopy(data)
        enforce_question_count(data, 5)
        assert data == snapshot

    def test_missing_questions_key_pads_from_empty(self):
        data = {}
        enforce_question_count(data, 2)
        assert [q["id"] for q in data["questions"]] == ["q1", "q2"]


# ── normalize_question_set ────────────────────────────────────────────────────

class TestNormalizeQuestionSet:
    def test_fenced_single_item_padded_to_three(self):
        raw = "```json\n" + _raw(1) + "\n```"
        result = normalize_question_set(raw, 3)
        assert [q.id for q in result.questions] == ["q1", "q2", "q3"]
        assert result.total_count == 3
        assert result.questions[0].question_text == "Who lit diyas in story 1?"
        assert result.questions[1].question_text == (
            "Question 2: Based on the text, what is an important concept to understand?"
        )
        assert result.questions[2].question_text.startswith("Question 3:")

    def test_truncation_is_prefix_preserving(self):
        result = normalize_question_set(_raw(7), 5)
        assert len(result.questions) == 5
        for i, q in enumerate(result.questions):
            expected = _model_question(i + 1)
            assert q.id == f"q{i + 1}"
            assert q.question_text == expected["question"]
            assert q.correct_answer == expected["correctAnswer"]
            assert q.points == expected["points"]

    def test_padding_is_deterministic(self):
        first = normalize_question_set(_raw(1), 4)
        second = normalize_question_set(_raw(1), 4)
        for a, b in zip(first.questions[1:], second.questions[1:]):
            for field in TEMPLATE_FIELDS:
                assert getattr(a, field) == getattr(b, field)
        synthetic = first.questions[1]
        assert synthetic.type == "multipleChoice"
        assert synthetic.options == list(SYNTHETIC_OPTIONS)
        assert synthetic.correct_answer == SYNTHETIC_OPTIONS[0]
        assert synthetic.points == 2
        assert synthetic.skill == "Reading Comprehension"
        assert synthetic.difficulty == "medium"

    def test_no_enforcement_without_target(self):
        result = normalize_question_set(_raw(7, total=3), None)
        assert len(result.questions) == 7
        assert result.total_count == 7
        # model ids survive when nothing is enforced
        assert result.questions[0].id == "model-1"

    def test_non_object_items_dropped_before_counting(self):
        raw = json.dumps({"questions": ["junk", _model_question(1), 42, None], "totalCount": 4})
        result = normalize_question_set(raw, 2)
        assert result.questions[0].question_text == "Who lit diyas in story 1?"
        assert result.questions[1].question_text.startswith("Question 2:")

    def test_unparseable_output_yields_synthetic_set(self):
        result = normalize_question_set("Sorry, I can't do that.", 3)
        assert [q.id for q in result.questions] == ["q1", "q2", "q3"]
        assert result.total_count == 3
        assert all(q.skill == "Reading Comprehension" for q in result.questions)

    def test_unparseable_output_without_target_yields_one(self):
        result = normalize_question_set("", None)
        assert len(result.questions) == 1
        assert result.total_count == 1

    def test_missing_questions_list_falls_back(self):
        result = normalize_question_set('{"items": []}', 2)
        assert len(result.questions) == 2

    def test_zero_target(self):
        result = normalize_question_set(_raw(3), 0)
        assert result.questions == []
        assert result.total_count == 0

    def test_output_round_trips_unchanged(self):
        once = normalize_question_set(_raw(2), 4)
        twice = normalize_question_set(once.model_dump_json(by_alias=True), 4)
        assert twice == once

    def test_deeply_nested_output_falls_back(self):
        raw = '{"questions": ' + "[" * 100000 + "]" * 100000 + "}"
        result = normalize_question_set(raw, 3)
        assert [q.id for q in result.questions] == ["q1", "q2", "q3"]
        assert result.total_count == 3
