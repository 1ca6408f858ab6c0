"""Prompt templates for differentiated worksheets and weekly lesson plans."""
import re

WORKSHEET_PROMPT = """You are Sahayak, an AI teaching assistant for Indian multi-grade classrooms.

CREATE A DIFFERENTIATED WORKSHEET FOR {grade_upper}

CONTENT ANALYSIS:
- Topic: {topic}
- Key Terms: {key_terms}
- Concepts: {concepts}
- Difficulty Level: {difficulty}
- Complexity: {complexity}

WORKSHEET REQUIREMENTS:
- Target Grade: {grade}
- Number of Exercises: {exercise_count}
- Use Indian names, places and cultural examples
{type_instructions}
Respond with ONLY a JSON object in this format:
{{
  "grade": "{grade}",
  "title": "{topic} - {grade} Worksheet",
  "difficulty": "{difficulty}",
  "instructions": "Instructions for students",
  "exercises": [
    {{
      "id": "ex1",
      "type": "multipleChoice|fillInBlank|shortAnswer|trueFalse|matching",
      "question": "Exercise text",
      "options": ["A", "B", "C", "D"],
      "correctAnswer": "Correct answer",
      "points": 2,
      "hint": "Optional hint"
    }}
  ]
}}"""

MIXED_TYPE_INSTRUCTIONS = """
EXERCISE TYPES TO INCLUDE (Mixed Variety):
- Multiple Choice (with 4 options) - 30%
- Fill in the Blank - 25%
- Short Answer - 20%
- True/False - 15%
- Matching (when appropriate) - 10%
"""

QUESTION_TYPE_LABELS = {
    "mcq": "Multiple Choice (with 4 options)",
    "shortAnswer": "Short Answer questions",
    "fillInBlank": "Fill in the Blank",
    "truefalse": "True/False questions",
    "matching": "Matching exercises",
}

WEEKLY_PLAN_PROMPT = """You are Sahayak, an expert AI teaching assistant for Indian multi-grade classrooms.

Create a detailed weekly lesson plan for Week {week} of {number_of_weeks} based on this textbook analysis:

TEXTBOOK ANALYSIS:
- Topic: {topic}
- Key Concepts: {concepts}
- Key Terms: {key_terms}
- Target Grades: {target_grades}

Plan Monday to Friday, 45 minutes a day, with activities that adapt to each grade.

Respond with ONLY a JSON object in this format:
{{
  "week": {week},
  "theme": "Week {week} theme based on {topic}",
  "overview": "What students will learn this week",
  "learningObjectives": ["Students will understand..."],
  "dailyPlans": {{
    "monday": {{
      "day": "Monday",
      "title": "Lesson title",
      "duration": "45 minutes",
      "activities": [
        {{
          "time": "0-10 min",
          "activity": "Activity name",
          "description": "What happens",
          "materials": ["Blackboard"],
          "gradeAdaptation": "How to adapt across grades"
        }}
      ]
    }},
    "tuesday": {{}},
    "wednesday": {{}},
    "thursday": {{}},
    "friday": {{}}
  }},
  "resources": {{
    "materials": ["material"],
    "culturalConnections": ["connection"],
    "assessmentTools": ["tool"]
  }},
  "homework": ["Monday: ..."],
  "adaptations": {{
    "lowerGrades": "...",
    "higherGrades": "...",
    "mixedGrade": "..."
  }}
}}"""

_GRADE_NUMBER_RE = re.compile(r"\d+")


def grade_profile(grade: str) -> tuple[str, str, int]:
    """(difficulty, complexity, exercise_count) for a grade label like "Grade 3"."""
    match = _GRADE_NUMBER_RE.search(grade or "")
    if match is None:
        return "medium", "intermediate", 8
    number = int(match.group())
    if number <= 2:
        return "easy", "simple", 6
    if number <= 5:
        return "medium", "intermediate", 8
    return "hard", "advanced", 10


def question_type_instructions(question_types: list[str]) -> str:
    if not question_types or "mixed" in question_types:
        return MIXED_TYPE_INSTRUCTIONS
    lines = "\n".join(f"- {QUESTION_TYPE_LABELS.get(t, t)}" for t in question_types)
    return (
        "\nEXERCISE TYPES TO INCLUDE (Selected Types Only):\n"
        f"{lines}\n\n"
        "DISTRIBUTION: Create exercises using ONLY the selected question types above.\n"
    )


def build_worksheet_prompt(analyzed, grade: str, question_types: list[str]) -> str:
    difficulty, complexity, exercise_count = grade_profile(grade)
    return WORKSHEET_PROMPT.format(
        grade_upper=grade.upper(),
        grade=grade,
        topic=analyzed.topic,
        key_terms=", ".join(analyzed.key_terms),
        concepts=", ".join(analyzed.concepts),
        difficulty=difficulty,
        complexity=complexity,
        exercise_count=exercise_count,
        type_instructions=question_type_instructions(question_types),
    )


def build_weekly_plan_prompt(analyzed, target_grades: list[str], week: int, number_of_weeks: int) -> str:
    return WEEKLY_PLAN_PROMPT.format(
        week=week,
        number_of_weeks=number_of_weeks,
        topic=analyzed.topic,
        concepts=", ".join(analyzed.concepts),
        key_terms=", ".join(analyzed.key_terms),
        target_grades=", ".join(target_grades),
    )
