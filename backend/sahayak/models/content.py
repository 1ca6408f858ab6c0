from sahayak.models.common import CamelModel


# ── Requests ─────────────────────────────────────────────────────────────────

class ContentRequest(CamelModel):
    description: str | None = None
    language: str | None = None
    grade: str | None = None
    subject: str = "general"
    location: str = "India"


class ExamplesRequest(CamelModel):
    grade: str | None = None
    subject: str | None = None
    language: str = "English"
    location: str = "India"


# ── Localized content bundle ─────────────────────────────────────────────────

class VocabularyItem(CamelModel):
    term: str = ""
    definition: str = ""
    example: str = ""


class MainContent(CamelModel):
    story: str = ""
    key_points: list[str] = []
    vocabulary: list[VocabularyItem] = []


class TeachingTip(CamelModel):
    category: str = ""
    tip: str = ""
    implementation: str = ""


class ExtensionActivity(CamelModel):
    title: str = ""
    description: str = ""
    materials: list[str] = []
    grade_adaptation: str = ""


class ContentBundle(CamelModel):
    main_content: MainContent
    teaching_tips: list[TeachingTip] = []
    extension_activities: list[ExtensionActivity] = []


# ── Example prompts ──────────────────────────────────────────────────────────

class ExamplePrompt(CamelModel):
    title: str = ""
    prompt: str = ""
    rationale: str = ""


class ExampleSet(CamelModel):
    examples: list[ExamplePrompt]
