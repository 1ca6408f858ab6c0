import logging
from functools import lru_cache
from typing import Protocol

from openai import OpenAI
from sahayak.core.config import Settings, get_settings

_prompt_logger = logging.getLogger("sahayak.llm_prompts")


class CompletionService(Protocol):
    """Anything that turns a prompt into free-form text."""

    model: str

    def complete(self, prompt: str) -> str: ...


def _log_prompt(provider: str, model: str, prompt: str, settings: Settings) -> None:
    if not settings.debug_llm_prompts:
        return
    _prompt_logger.warning(
        "\n\n%s\n"
        "── PROMPT ──────────────────────────────────────────────\n%s\n"
        "── CONFIG ──────────────────────────────────────────────\n"
        "  provider=%s  model=%s  temp=%s  max_tokens=%s\n"
        "%s",
        "=" * 60,
        prompt,
        provider,
        model,
        settings.llm_temperature,
        settings.llm_max_tokens,
        "=" * 60,
    )


# ── Gemini ───────────────────────────────────────────────────────────────────

class GeminiCompletionService:
    def __init__(self, settings: Settings):
        from google import genai
        from google.genai import types

        self.settings = settings
        self.model = settings.gemini_model
        # HttpOptions.timeout is in milliseconds
        self._client = genai.Client(
            api_key=settings.gemini_api_key,
            http_options=types.HttpOptions(timeout=int(settings.llm_timeout_seconds * 1000)),
        )

    def complete(self, prompt: str) -> str:
        from google.genai import types

        _log_prompt("gemini", self.model, prompt, self.settings)
        config = types.GenerateContentConfig(
            temperature=self.settings.llm_temperature,
            max_output_tokens=self.settings.llm_max_tokens,
        )
        response = self._client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=config,
        )
        return response.text or ""


# ── OpenAI ───────────────────────────────────────────────────────────────────

class OpenAICompletionService:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.model = settings.openai_model
        self._client = OpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.llm_timeout_seconds,
            max_retries=0,
        )

    def complete(self, prompt: str) -> str:
        _log_prompt("openai", self.model, prompt, self.settings)
        response = self._client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.settings.llm_temperature,
            max_tokens=self.settings.llm_max_tokens,
        )
        return response.choices[0].message.content or ""


def get_llm_client(settings=None) -> CompletionService:
    """Return the active completion service based on llm_provider setting."""
    if settings is None:
        settings = get_settings()
    if settings.llm_provider == "openai":
        return OpenAICompletionService(settings)
    return GeminiCompletionService(settings)


@lru_cache
def get_completion_service() -> CompletionService:
    """Process-wide completion client, built once on first use."""
    return get_llm_client(get_settings())
