import asyncio
import logging
import time

from sahayak.core.config import get_settings
from sahayak.core.deps import CompletionService, get_completion_service
from sahayak.core.errors import UpstreamServiceError

logger = logging.getLogger("sahayak.ai")


class AIService:
    """Sends one prompt to the completion service and returns its raw text.

    Exactly one outbound call per ``generate``. No retries. Any failure,
    including the per-call timeout, surfaces as UpstreamServiceError.
    """

    def __init__(self, client: CompletionService, timeout_seconds: float | None = None):
        self.client = client
        if timeout_seconds is None:
            timeout_seconds = get_settings().llm_timeout_seconds
        self.timeout_seconds = timeout_seconds

    @property
    def model_name(self) -> str:
        return getattr(self.client, "model", "unknown")

    async def generate(self, prompt: str) -> str:
        t0 = time.time()
        try:
            text = await asyncio.wait_for(
                asyncio.to_thread(self.client.complete, prompt),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error("completion timed out after %.1fs", self.timeout_seconds)
            raise UpstreamServiceError(
                f"Completion service timed out after {self.timeout_seconds:g}s"
            ) from e
        except Exception as e:
            logger.error("completion failed: %s", e, exc_info=True)
            raise UpstreamServiceError(f"Completion service error: {e}") from e

        dt = int((time.time() - t0) * 1000)
        text = text if isinstance(text, str) else ""
        logger.info(
            "completion ok model=%s prompt_chars=%d response_chars=%d latency_ms=%d",
            self.model_name, len(prompt), len(text), dt,
        )
        return text


def get_ai_service() -> AIService:
    return AIService(get_completion_service())
