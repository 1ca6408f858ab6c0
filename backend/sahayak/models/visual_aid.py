from sahayak.models.common import CamelModel


class VisualAidRequest(CamelModel):
    description: str | None = None
    topic: str | None = None
    concept: str | None = None
    subject: str = "general"
    grade_level: str = "general"
    complexity: str = "simple"
    medium: str = "blackboard"

    @property
    def subject_text(self) -> str:
        """Whichever of description/topic/concept the caller supplied."""
        return self.description or self.topic or self.concept or ""


class VisualAid(CamelModel):
    id: str = ""
    title: str
    description: str = ""
    subject: str = ""
    complexity: str = "simple"
    concepts: list[str] = []
    materials: list[str] = []
    instructions: list[str] = []
    blackboard_steps: list[str]
    teaching_tips: list[str] = []
    svg_content: str | None = None
