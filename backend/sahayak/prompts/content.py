"""Prompt templates for localized content and example prompts."""

CONTENT_PROMPT = """You are Sahayak, an AI teaching assistant for multi-grade Indian classrooms.

Create culturally relevant educational content.

Teacher's request: {description}
Language: {language}
Grade Level: {grade}
Subject: {subject}
Location: {location}

Use local names, places, festivals and everyday situations familiar to children in {location}.
Keep vocabulary suitable for Grade {grade}.

Respond with ONLY a JSON object in this format:
{{
  "mainContent": {{
    "story": "The story or explanation in {language}",
    "keyPoints": ["point 1", "point 2", "point 3"],
    "vocabulary": [
      {{"term": "word", "definition": "simple definition", "example": "local example"}}
    ]
  }},
  "teachingTips": [
    {{"category": "Engagement", "tip": "tip text", "implementation": "how to do it"}}
  ],
  "extensionActivities": [
    {{"title": "Activity", "description": "what students do", "materials": ["item"], "gradeAdaptation": "how to adapt"}}
  ]
}}"""

EXAMPLES_PROMPT = """You are Sahayak, an AI teaching assistant for Indian classrooms.

Suggest three example requests a teacher could make to generate {subject} content
for Grade {grade} students in {location}, written in {language}.

Respond with ONLY a JSON object in this format:
{{
  "examples": [
    {{"title": "Short title", "prompt": "The full request a teacher would type", "rationale": "Why it works"}}
  ]
}}"""


def build_content_prompt(req) -> str:
    return CONTENT_PROMPT.format(
        description=req.description,
        language=req.language,
        grade=req.grade,
        subject=req.subject,
        location=req.location,
    )


def build_examples_prompt(req) -> str:
    return EXAMPLES_PROMPT.format(
        grade=req.grade,
        subject=req.subject,
        language=req.language,
        location=req.location,
    )
