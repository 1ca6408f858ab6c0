from sahayak.models.common import CamelModel


class PassageRequest(CamelModel):
    grade: str | None = None
    subject: str | None = None
    topic: str | None = None
    language: str = "English"
    cultural_context: str = "Indian educational context"


class ReadingPassage(CamelModel):
    title: str = ""
    content: str
    grade_level: str = ""
    subject: str = ""
    key_points: list[str] = []
    discussion_questions: list[str] = []
    vocabulary: list[str] = []
