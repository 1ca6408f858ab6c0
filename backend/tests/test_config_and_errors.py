import pytest

from sahayak.core.config import Settings
from sahayak.core.errors import ValidationError, require_fields
from sahayak.models.questions import QuestionRequest


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.llm_provider == "gemini"
        assert s.max_questions == 50
        assert s.llm_timeout_seconds > 0

    def test_active_model_follows_provider(self):
        assert Settings(llm_provider="openai", openai_model="gpt-x").active_model == "gpt-x"
        assert Settings(llm_provider="gemini", gemini_model="gem-y").active_model == "gem-y"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "12.5")
        assert Settings().llm_timeout_seconds == 12.5


class TestRequireFields:
    def test_dict_payload(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields({"grade": "3", "subject": ""}, "grade", "subject", "topic")
        assert exc_info.value.missing == ["subject", "topic"]
        assert str(exc_info.value) == "Missing required fields: subject, topic"

    def test_model_payload_uses_wire_names(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields(QuestionRequest(), "text", "grade_level")
        assert exc_info.value.missing == ["text", "gradeLevel"]

    def test_present_fields_pass(self):
        require_fields({"grade": 0, "subject": "EVS"}, "grade", "subject")

    def test_custom_message(self):
        err = ValidationError(["numQuestions"], "numQuestions must be at most 50")
        assert str(err) == "numQuestions must be at most 50"
        assert err.missing == ["numQuestions"]


class TestQuestionCap:
    def test_cap_applies_before_model_call(self):
        import asyncio

        from conftest import FakeCompletionService
        from sahayak.services.ai import AIService
        from sahayak.services.generation import GenerationService

        fake = FakeCompletionService("{}")
        service = GenerationService(AIService(fake, timeout_seconds=1), Settings(max_questions=5))
        req = QuestionRequest(text="abc", gradeLevel="3", numQuestions=6)
        with pytest.raises(ValidationError, match="at most 5"):
            asyncio.run(service.questions(req))
        assert fake.prompts == []
