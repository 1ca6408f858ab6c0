import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from fastapi.testclient import TestClient

from sahayak.main import app
from sahayak.services.ai import AIService
from sahayak.services.generation import GenerationService, get_generation_service


class FakeCompletionService:
    """Stands in for the hosted model. Replays canned responses in order;
    the last one repeats once the queue runs dry."""

    model = "fake-model"

    def __init__(self, *responses: str, error: Exception | None = None):
        self.responses = list(responses)
        self.error = error
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0] if self.responses else ""


@pytest.fixture
def fake_llm():
    return FakeCompletionService()


@pytest.fixture
def client(fake_llm):
    app.dependency_overrides[get_generation_service] = (
        lambda: GenerationService(AIService(fake_llm, timeout_seconds=5))
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
