"""Prompt template for blackboard visual aids."""

VISUAL_AID_PROMPT = """You are Sahayak, an expert AI teaching assistant for Indian classrooms.

Design a visual aid a teacher can draw on a {medium} for: {subject_text}
Subject: {subject}
Grade level: {grade_level}
Complexity: {complexity}

Keep it drawable with chalk in a few minutes. Include a simple SVG version.

Respond with ONLY a JSON object in this format:
{{
  "title": "Short title",
  "description": "What the visual shows",
  "subject": "{subject}",
  "complexity": "{complexity}",
  "concepts": ["concept"],
  "materials": ["White chalk"],
  "instructions": ["How to use it in class"],
  "blackboardSteps": ["Step 1: ..."],
  "teachingTips": ["tip"],
  "svgContent": "<svg ...>...</svg>"
}}"""


def build_visual_aid_prompt(req) -> str:
    return VISUAL_AID_PROMPT.format(
        medium=req.medium,
        subject_text=req.subject_text,
        subject=req.subject,
        grade_level=req.grade_level,
        complexity=req.complexity,
    )
