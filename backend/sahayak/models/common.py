from datetime import datetime, timezone
from typing import Generic, TypeVar
import time

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class ResponseMetadata(CamelModel):
    processing_time: int
    timestamp: str

    @classmethod
    def since(cls, t0: float) -> "ResponseMetadata":
        return cls(
            processing_time=int((time.time() - t0) * 1000),
            timestamp=datetime.now(timezone.utc).isoformat(),
        )


class ApiResponse(CamelModel, Generic[T]):
    success: bool
    data: T | None = None
    error: str | None = None
    metadata: ResponseMetadata | None = None


class AnalyzedContent(CamelModel):
    """Textbook analysis the dashboard sends back for worksheets and plans."""

    topic: str = "General Topic"
    key_terms: list[str] = []
    concepts: list[str] = []
    difficulty: str | None = None
    subject: str | None = None
    suggested_grades: list[str] = []
    image_description: str | None = None
