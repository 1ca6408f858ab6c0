from pydantic import Field

from sahayak.models.common import AnalyzedContent, CamelModel


class WorksheetRequest(CamelModel):
    analyzed_content: AnalyzedContent | None = None
    target_grades: list[str] = []
    question_types: list[str] = ["mixed"]


class Exercise(CamelModel):
    id: str
    type: str
    question: str
    options: list[str] = []
    correct_answer: str
    points: int = 2
    hint: str = ""


class Worksheet(CamelModel):
    grade: str = ""
    title: str = ""
    difficulty: str = "medium"
    instructions: str = ""
    exercises: list[Exercise]


class WorksheetCollection(CamelModel):
    worksheets: list[Worksheet]
    total_generated: int
    target_grades: list[str]


# ── Weekly lesson plans ──────────────────────────────────────────────────────

class WeeklyPlanRequest(CamelModel):
    analyzed_content: AnalyzedContent | None = None
    target_grades: list[str] = []
    number_of_weeks: int = Field(default=1, ge=1, le=12)


class PlanActivity(CamelModel):
    time: str = ""
    activity: str = ""
    description: str = ""
    materials: list[str] = []
    grade_adaptation: str = ""


class DailyPlan(CamelModel):
    day: str = ""
    title: str = ""
    duration: str = "45 minutes"
    activities: list[PlanActivity] = []


class PlanResources(CamelModel):
    materials: list[str] = []
    cultural_connections: list[str] = []
    assessment_tools: list[str] = []


class WeeklyPlan(CamelModel):
    week: int = 1
    theme: str = ""
    overview: str = ""
    learning_objectives: list[str] = []
    daily_plans: dict[str, DailyPlan]
    resources: PlanResources = PlanResources()
    homework: list[str] = []
    adaptations: dict[str, str] = {}


class WeeklyPlanCollection(CamelModel):
    weekly_plans: list[WeeklyPlan]
    total_weeks: int
    target_grades: list[str]
