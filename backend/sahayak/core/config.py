from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    app_name: str = "Sahayak AI"
    debug: bool = False

    # LLM provider: "gemini" (default) or "openai"
    llm_provider: str = "gemini"

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"

    # OpenAI (kept for fallback)
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # Completion call tuning
    llm_temperature: float = 0.7
    llm_max_tokens: int = 8192
    llm_timeout_seconds: float = 60.0
    debug_llm_prompts: bool = False

    # Upper bound on numQuestions. The questions prompt embeds one example
    # item per requested question, so this caps prompt size.
    max_questions: int = 50

    # CORS
    frontend_url: str = "http://localhost:5173"
    allowed_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:5174",
        "http://localhost:5175",
        "http://localhost:5176",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def active_model(self) -> str:
        return self.openai_model if self.llm_provider == "openai" else self.gemini_model


@lru_cache
def get_settings() -> Settings:
    return Settings()
