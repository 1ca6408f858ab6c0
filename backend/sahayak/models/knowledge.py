from sahayak.models.common import CamelModel


class KnowledgeRequest(CamelModel):
    question: str | None = None
    language: str = "english"
    grade: str = "3-5"
    subject: str = "general"
    context: str = "multi-grade Indian classroom"


class Explanations(CamelModel):
    simple: str = ""
    detailed: str = ""
    analogy: str = ""
    real_world: str = ""


class CulturalContext(CamelModel):
    indian_examples: list[str] = []
    local_analogies: list[str] = []
    festivals: list[str] = []
    daily_life: list[str] = []


class TeachingResources(CamelModel):
    common_misconceptions: list[str] = []
    teaching_tips: list[str] = []
    demonstrations: list[str] = []
    activities: list[str] = []
    materials: list[str] = []


class VisualSuggestions(CamelModel):
    simple_drawings: list[str] = []
    experiments: list[str] = []
    gestures: list[str] = []


class KnowledgeBundle(CamelModel):
    question: str = ""
    subject: str = ""
    grade_level: str = ""
    language: str = ""
    explanations: Explanations
    cultural_context: CulturalContext = CulturalContext()
    teaching_resources: TeachingResources = TeachingResources()
    visual_suggestions: VisualSuggestions = VisualSuggestions()
    related_questions: list[str] = []
    difficulty: str = "intermediate"
    estimated_time: str = ""
    # keys like "grades1-2" are not identifiers, so a plain mapping
    grade_adaptations: dict[str, str] = {}
