"""
Tests for the shape-repair half of the normalizer.
"""
import json

import pytest

from sahayak.core.errors import MalformedResponseError
from sahayak.models.content import ContentBundle, ContentRequest
from sahayak.models.knowledge import KnowledgeBundle, KnowledgeRequest
from sahayak.services.fallbacks import content_fallback, knowledge_fallback
from sahayak.services.normalizer import clean_json_response, parse_model_json, repair_response

CONTENT_REQ = ContentRequest(description="Monsoon story", language="Hindi", grade="3", subject="EVS")
KNOWLEDGE_REQ = KnowledgeRequest(question="Why is the sky blue?")

VALID_CONTENT = {
    "mainContent": {
        "story": "Ravi watched the clouds over Pune.",
        "keyPoints": ["Clouds carry water"],
        "vocabulary": [{"term": "monsoon", "definition": "rainy season", "example": "June rains"}],
    },
    "teachingTips": [],
    "extensionActivities": [],
}


def _repair_content(raw):
    return repair_response(raw, ContentBundle, lambda: content_fallback(CONTENT_REQ, raw))


# ── clean_json_response ───────────────────────────────────────────────────────

class TestCleanJsonResponse:
    def test_strips_json_fence(self):
        assert clean_json_response('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_strips_bare_fence(self):
        assert clean_json_response('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_strips_fences_in_the_middle(self):
        raw = 'Here you go:\n```json\n{"a": 1}\n```\nEnjoy!'
        assert clean_json_response(raw) == '{"a": 1}'

    def test_trims_prose_around_object(self):
        assert clean_json_response('Sure! Here\'s your content: {"foo":1} thanks') == '{"foo":1}'

    def test_array_envelope_trims_to_brackets(self):
        assert clean_json_response('list: [1, 2, 3] done', envelope="array") == "[1, 2, 3]"

    def test_no_envelope_keeps_prose(self):
        assert clean_json_response('  note {"a": 1}  ', envelope=None) == 'note {"a": 1}'

    def test_nested_braces_keep_outer_object(self):
        raw = 'x {"a": {"b": 2}} y'
        assert clean_json_response(raw) == '{"a": {"b": 2}}'

    def test_empty_and_none(self):
        assert clean_json_response("") == ""
        assert clean_json_response(None) == ""


# ── parse_model_json ──────────────────────────────────────────────────────────

class TestParseModelJson:
    def test_parses_fenced_object(self):
        assert parse_model_json('```json\n{"a": 1}\n```') == {"a": 1}

    def test_prose_only_raises(self):
        with pytest.raises(MalformedResponseError):
            parse_model_json("I cannot help with that.")

    def test_truncated_json_raises(self):
        with pytest.raises(MalformedResponseError):
            parse_model_json('{"questions": [{"id": "q1"')

    def test_array_for_object_envelope_raises(self):
        # no braces at all, so nothing to trim to
        with pytest.raises(MalformedResponseError):
            parse_model_json("[1, 2]")

    def test_array_envelope(self):
        assert parse_model_json("```\n[1, 2]\n```", envelope="array") == [1, 2]

    def test_object_for_array_envelope_raises(self):
        with pytest.raises(MalformedResponseError):
            parse_model_json('{"a": 1}', envelope="array")


# ── repair_response ───────────────────────────────────────────────────────────

NOISY_INPUTS = [
    "",
    "   ",
    "I cannot help with that.",
    '{"mainContent": {"story": "cut off',
    "```json\n" + json.dumps(VALID_CONTENT) + "\n```",
    "Sure! Here's your content: " + json.dumps(VALID_CONTENT) + " Let me know!",
    '{"foo": 1}',
    '{"mainContent": "not an object"}',
    "[]",
    "null",
    "```",
    '{"mainContent": {"story": "x"}, "n": 1' + "0" * 5000 + "}",
    '{"mainContent": ' + "[" * 100000 + "]" * 100000 + "}",
]


class TestRepairResponse:
    @pytest.mark.parametrize("raw", NOISY_INPUTS)
    def test_always_returns_schema(self, raw):
        result = _repair_content(raw)
        assert isinstance(result, ContentBundle)
        assert isinstance(result.main_content.story, str)

    def test_valid_payload_is_kept(self):
        result = _repair_content("```json\n" + json.dumps(VALID_CONTENT) + "\n```")
        assert result.main_content.story == "Ravi watched the clouds over Pune."
        assert result.main_content.vocabulary[0].term == "monsoon"

    def test_unknown_object_falls_back(self):
        result = _repair_content('Sure! Here\'s your content: {"foo":1}')
        assert result.main_content.story.startswith("Here's an engaging EVS story for Grade 3")

    def test_fallback_embeds_raw_excerpt(self):
        raw = "The model rambled " * 100
        result = _repair_content(raw)
        assert raw[:500] in result.main_content.story
        assert result.main_content.story.endswith("...")

    def test_partial_payload_gets_defaults(self):
        result = _repair_content('{"mainContent": {"story": "Short"}}')
        assert result.main_content.story == "Short"
        assert result.main_content.key_points == []
        assert result.teaching_tips == []

    def test_fallback_not_called_on_success(self):
        calls = []

        def fallback():
            calls.append(1)
            return content_fallback(CONTENT_REQ)

        repair_response(json.dumps(VALID_CONTENT), ContentBundle, fallback)
        assert calls == []

    def test_adapt_failure_falls_back(self):
        def adapt(data):
            raise KeyError("boom")

        result = repair_response(
            json.dumps(VALID_CONTENT), ContentBundle,
            lambda: content_fallback(CONTENT_REQ), adapt=adapt,
        )
        assert "Grade 3" in result.main_content.story

    def test_knowledge_prose_uses_question_fallback(self):
        result = repair_response(
            "I cannot help with that.", KnowledgeBundle, lambda: knowledge_fallback(KNOWLEDGE_REQ)
        )
        assert "Why is the sky blue?" in result.explanations.simple


class TestIdempotentRepair:
    @pytest.mark.parametrize("raw", NOISY_INPUTS)
    def test_repair_of_own_output_is_stable(self, raw):
        once = _repair_content(raw)
        twice = _repair_content(once.model_dump_json(by_alias=True))
        assert twice == once


class TestParseLimits:
    def test_huge_integer_literal_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            parse_model_json('{"n": 1' + "0" * 5000 + "}")

    def test_excessive_nesting_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            parse_model_json('{"a": ' + "[" * 100000 + "]" * 100000 + "}")
