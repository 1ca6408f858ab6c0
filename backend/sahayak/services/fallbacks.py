"""
Hand-authored fallback values, one per content type.

Each builder returns a plain dict that validates against the matching
response model in ``sahayak.models``. The normalizer substitutes these when
model output cannot be parsed or does not fit the schema, so callers always
receive a schema-valid payload.

Also home to the legacy knowledge-base conversion (older responses carried a
flat ``answer`` instead of the ``explanations`` bundle) and the fixed
synthetic question template used to pad short question lists.
"""
from __future__ import annotations

import uuid
from xml.sax.saxutils import escape as xml_escape

from sahayak.models.content import ContentRequest, ExamplesRequest
from sahayak.models.knowledge import KnowledgeRequest
from sahayak.models.passage import PassageRequest
from sahayak.models.visual_aid import VisualAidRequest

# ---------------------------------------------------------------------------
# Synthetic question template
# ---------------------------------------------------------------------------

SYNTHETIC_OPTIONS: tuple[str, ...] = (
    "Option A - First possible answer",
    "Option B - Second possible answer",
    "Option C - Third possible answer",
    "Option D - Fourth possible answer",
)


def synthetic_question(number: int) -> dict:
    """Placeholder multiple-choice item used to pad a short question list.

    Only ``id`` and the number in the text vary with ``number``.
    """
    return {
        "id": f"q{number}",
        "type": "multipleChoice",
        "questionText": (
            f"Question {number}: Based on the text, what is an important concept to understand?"
        ),
        "options": list(SYNTHETIC_OPTIONS),
        "correctAnswer": SYNTHETIC_OPTIONS[0],
        "points": 2,
        "skill": "Reading Comprehension",
        "difficulty": "medium",
        "culturalContext": "Connects to Indian educational values and cultural context",
    }


def question_set_fallback(target: int | None) -> dict:
    """Whole question set when the model output is unusable.

    Without a usable target count a single placeholder is returned.
    """
    count = 1 if target is None else target
    return {
        "questions": [synthetic_question(i) for i in range(1, count + 1)],
        "totalCount": count,
    }


# ---------------------------------------------------------------------------
# Localized content
# ---------------------------------------------------------------------------

def content_fallback(req: ContentRequest, raw_text: str = "") -> dict:
    subject, grade, location = req.subject, req.grade, req.location
    excerpt = (raw_text or "")[:500]
    return {
        "mainContent": {
            "story": (
                f"Here's an engaging {subject} story for Grade {grade} students in {location}. "
                f"{excerpt}..."
            ),
            "keyPoints": [
                f"Key concept 1 for {subject}",
                "Important learning point 2",
                "Practical application 3",
                f"Cultural connection to {location}",
            ],
            "vocabulary": [
                {
                    "term": "Important Term",
                    "definition": "Simple definition for students",
                    "example": f"Example from {location} culture",
                }
            ],
        },
        "teachingTips": [
            {
                "category": "Engagement",
                "tip": "Use local examples and cultural references",
                "implementation": "Connect lessons to familiar experiences",
            },
            {
                "category": "Materials",
                "tip": "Use locally available materials",
                "implementation": "Adapt activities to available resources",
            },
            {
                "category": "Assessment",
                "tip": "Use informal assessment techniques",
                "implementation": "Observe student participation and understanding",
            },
        ],
        "extensionActivities": [
            {
                "title": "Community Connection",
                "description": "Connect learning to local community",
                "materials": ["local materials", "community resources"],
                "gradeAdaptation": "Adjust complexity for different grade levels",
            },
            {
                "title": "Creative Project",
                "description": "Create something related to the topic",
                "materials": ["basic art supplies", "local materials"],
                "gradeAdaptation": "Vary project scope and complexity",
            },
        ],
    }


def examples_fallback(req: ExamplesRequest) -> dict:
    subject, grade, language, location = req.subject, req.grade, req.language, req.location
    return {
        "examples": [
            {
                "title": "Cultural Story",
                "prompt": (
                    f"Create a {subject} story in {language} about {location} traditions "
                    f"that teaches important concepts to Grade {grade} students"
                ),
                "rationale": "Cultural stories connect learning to students' lived experiences",
            },
            {
                "title": "Local Activity",
                "prompt": (
                    f"Design a hands-on {subject} activity using materials available in "
                    f"{location} for Grade {grade}"
                ),
                "rationale": "Local materials make learning practical and accessible",
            },
            {
                "title": "Community Project",
                "prompt": (
                    f"Develop a {subject} project that connects Grade {grade} students to "
                    f"their {location} community"
                ),
                "rationale": "Community connections make learning meaningful and relevant",
            },
        ]
    }


# ---------------------------------------------------------------------------
# Knowledge base
# ---------------------------------------------------------------------------

def knowledge_fallback(req: KnowledgeRequest) -> dict:
    question, grade = req.question, req.grade
    return {
        "question": question,
        "subject": req.subject,
        "gradeLevel": grade,
        "language": req.language,
        "explanations": {
            "simple": (
                f"Here's a simple explanation of {question} for {grade} students. This concept "
                "is important because it helps us understand the world around us. Let me break "
                "it down in easy terms."
            ),
            "detailed": (
                f"A more detailed explanation of {question} would include the scientific "
                "principles and deeper understanding. This concept involves several key "
                "components that work together to create the phenomenon we observe."
            ),
            "analogy": (
                f"Think of {question} like something familiar from Indian daily life. Just as we "
                "see different processes in our kitchen when cooking, this concept works in a "
                "similar way in nature."
            ),
            "realWorld": (
                f"In real life, {question} affects many things we see every day in India. From "
                "our monsoon seasons to the way we cook our food, this concept is everywhere "
                "around us."
            ),
        },
        "culturalContext": {
            "indianExamples": [
                "Example from Indian festivals like Diwali or Holi",
                "Example from Indian climate and monsoons",
                "Example from Indian cooking and spices",
                "Example from Indian daily family life",
                "Example from Indian crafts and traditions",
            ],
            "localAnalogies": [
                "Like making rotis in the kitchen",
                "Like celebrating festivals with family",
                "Like the changing seasons in India",
                "Like working together in Indian communities",
            ],
            "festivals": [
                "Connection to major Indian festivals",
                "Connection to regional celebrations",
            ],
            "dailyLife": [
                "How this appears in Indian homes",
                "How this relates to Indian school life",
                "How this connects to Indian occupations",
            ],
        },
        "teachingResources": {
            "commonMisconceptions": [
                "Students might think this concept works differently than it does",
                "Another common misunderstanding about this topic",
                "Third misconception to address carefully",
            ],
            "teachingTips": [
                "Use familiar Indian examples to explain this concept",
                "Connect to students' daily experiences",
                "Use simple demonstrations with available materials",
                "Encourage questions and discussion",
            ],
            "demonstrations": [
                "Simple classroom demonstration using basic materials",
                "Hands-on activity to show the concept",
                "Visual demonstration using drawings",
            ],
            "activities": [
                "Interactive activity using local materials",
                "Group activity for multi-grade classroom",
                "Individual practice activity",
                "Creative project to extend learning",
            ],
            "materials": [
                "Basic classroom supplies",
                "Common household items",
                "Natural materials from environment",
                "Simple tools available in Indian schools",
            ],
        },
        "visualSuggestions": {
            "simpleDrawings": [
                "Simple diagram for the blackboard",
                "Basic sketch to illustrate the concept",
                "Easy visual using shapes and lines",
            ],
            "experiments": [
                "Safe experiment to demonstrate concept",
                "Observation activity for students",
            ],
            "gestures": [
                "Hand gestures to explain the concept",
                "Body movements to demonstrate the idea",
            ],
        },
        "relatedQuestions": [
            "Follow-up question to deepen understanding",
            "Connected question about similar concept",
            "Advanced question for higher grades",
            "Practical application question",
            "Cultural connection question",
        ],
        "difficulty": "intermediate",
        "estimatedTime": "10 minutes for explanation + 15 minutes for activity",
        "gradeAdaptations": {
            "grades1-2": "Very simple explanation with lots of pictures and examples",
            "grades3-5": "Standard explanation with Indian examples and activities",
            "grades6-8": "More detailed explanation with scientific terminology",
            "grades9-10": "Advanced explanation with real-world applications",
        },
    }


def _as_text(value, default: str) -> str:
    if value is None or value == "":
        return default
    return value if isinstance(value, str) else str(value)


def _as_list(value) -> list:
    if isinstance(value, list):
        return value
    return [] if value is None else [value]


def convert_legacy_knowledge(data, req: KnowledgeRequest):
    """Map the flat ``{answer, examples, analogy, activity}`` shape onto the
    explanations bundle. Returns ``data`` untouched when it is not legacy.
    """
    if not isinstance(data, dict) or not data.get("answer") or data.get("explanations"):
        return data

    question = req.question or ""
    answer = _as_text(data.get("answer"), "Simple explanation not available")
    analogy = _as_text(data.get("analogy"), "")
    activity = _as_text(data.get("activity"), "")

    return {
        "question": question,
        "subject": req.subject,
        "gradeLevel": req.grade,
        "language": req.language,
        "explanations": {
            "simple": answer,
            "detailed": f'A more detailed explanation of "{question}": {answer}',
            "analogy": analogy or "Analogy not available",
            "realWorld": f"Real-world application: {answer}",
        },
        "culturalContext": {
            "indianExamples": [_as_text(e, "") for e in _as_list(data.get("examples"))],
            "localAnalogies": [analogy or "Local analogy not available"],
            "festivals": ["Connection to Indian festivals and traditions"],
            "dailyLife": ["How this concept appears in Indian daily life"],
        },
        "teachingResources": {
            "commonMisconceptions": ["Common student misconceptions about this topic"],
            "teachingTips": ["Practical teaching tips for this concept"],
            "demonstrations": [activity or "Simple classroom demonstration"],
            "activities": [activity or "Hands-on learning activity"],
            "materials": ["Basic classroom materials needed"],
        },
        "visualSuggestions": {
            "simpleDrawings": ["Simple diagram for blackboard"],
            "experiments": [activity or "Simple experiment"],
            "gestures": ["Hand gestures to explain concept"],
        },
        "relatedQuestions": [
            f"What happens when {question.lower().replace('why', 'how')}?",
            "How does this relate to other concepts?",
            "What are practical applications of this?",
        ],
        "difficulty": "intermediate",
        "estimatedTime": "10 minutes explanation + 15 minutes activity",
        "gradeAdaptations": {
            "grades1-2": "Very simple explanation with pictures",
            "grades3-5": answer,
            "grades6-8": f"More detailed: {answer}",
            "grades9-10": "Advanced explanation with scientific details",
        },
    }


# ---------------------------------------------------------------------------
# Worksheets and weekly plans
# ---------------------------------------------------------------------------

def worksheet_fallback(grade: str, topic: str, difficulty: str, exercise_count: int) -> dict:
    exercises = []
    for i in range(exercise_count):
        mcq = i % 2 == 0
        exercises.append({
            "id": f"ex{i + 1}",
            "type": "multipleChoice" if mcq else "shortAnswer",
            "question": (
                f"Question {i + 1}: Based on the textbook content, what is an important "
                "concept to understand?"
            ),
            "options": ["Option A", "Option B", "Option C", "Option D"] if mcq else [],
            "correctAnswer": "Option A" if mcq else "Sample answer explaining key concept",
            "points": 2,
            "hint": "Think about the main ideas from the textbook page",
        })
    return {
        "grade": grade,
        "title": f"{topic} - {grade} Worksheet",
        "difficulty": difficulty,
        "instructions": "Read each question carefully and provide your best answer.",
        "exercises": exercises,
    }


def _single_block_day(day: str, title: str, activity: str, description: str,
                      materials: list[str], adaptation: str) -> dict:
    return {
        "day": day,
        "title": title,
        "duration": "45 minutes",
        "activities": [
            {
                "time": "0-45 min",
                "activity": activity,
                "description": description,
                "materials": materials,
                "gradeAdaptation": adaptation,
            }
        ],
    }


def weekly_plan_fallback(week: int, topic: str) -> dict:
    return {
        "week": week,
        "theme": f"Week {week}: {topic}",
        "overview": (
            f"This week students will explore {topic} through various activities and "
            "cultural connections."
        ),
        "learningObjectives": [
            f"Students will understand the key concepts of {topic}",
            "Students will be able to apply learning to real-world situations",
            "Students will analyze the cultural significance of the topic",
        ],
        "dailyPlans": {
            "monday": {
                "day": "Monday",
                "title": "Introduction to the Topic",
                "duration": "45 minutes",
                "activities": [
                    {
                        "time": "0-10 min",
                        "activity": "Warm-up and Review",
                        "description": "Quick review and introduction",
                        "materials": ["Blackboard", "Chalk"],
                        "gradeAdaptation": "Simpler questions for younger grades",
                    },
                    {
                        "time": "10-35 min",
                        "activity": "Main Lesson",
                        "description": f"Introduce {topic} with Indian examples",
                        "materials": ["Textbook", "Local examples"],
                        "gradeAdaptation": "Different complexity levels",
                    },
                    {
                        "time": "35-45 min",
                        "activity": "Wrap-up",
                        "description": "Summary and preview",
                        "materials": ["Discussion"],
                        "gradeAdaptation": "Age-appropriate questioning",
                    },
                ],
            },
            "tuesday": _single_block_day(
                "Tuesday", "Exploring Key Concepts", "Concept Exploration",
                "Deep dive into key concepts", ["Various materials"], "Multi-level activities",
            ),
            "wednesday": _single_block_day(
                "Wednesday", "Practical Applications", "Real-world Connections",
                "Connect to daily life", ["Local examples"], "Different complexity",
            ),
            "thursday": _single_block_day(
                "Thursday", "Creative Expression", "Creative Project",
                "Express learning creatively", ["Art supplies"], "Different mediums",
            ),
            "friday": _single_block_day(
                "Friday", "Review and Assessment", "Review and Assess",
                "Week review and assessment", ["Assessment tools"], "Multiple formats",
            ),
        },
        "resources": {
            "materials": ["Blackboard", "Chalk", "Textbook", "Local materials"],
            "culturalConnections": ["Local festivals", "Community examples"],
            "assessmentTools": ["Oral questions", "Observation", "Peer assessment"],
        },
        "homework": [
            "Monday: Observation task",
            "Tuesday: Practice exercise",
            "Wednesday: Community activity",
            "Thursday: Creative work",
            "Friday: Reflection",
        ],
        "adaptations": {
            "lowerGrades": "Simpler activities and visual aids",
            "higherGrades": "More complex analysis and projects",
            "mixedGrade": "Peer teaching and group work",
        },
    }


# ---------------------------------------------------------------------------
# Visual aids and reading passages
# ---------------------------------------------------------------------------

def _blackboard_svg(label: str, caption: str) -> str:
    return (
        '<svg width="400" height="300" viewBox="0 0 400 300" xmlns="http://www.w3.org/2000/svg">'
        '<rect x="50" y="50" width="300" height="200" fill="none" stroke="black" stroke-width="2"/>'
        '<circle cx="200" cy="150" r="60" fill="none" stroke="black" stroke-width="2"/>'
        '<text x="200" y="155" text-anchor="middle" font-family="Arial" font-size="14" '
        f'fill="black">{xml_escape(label)}</text>'
        '<text x="200" y="280" text-anchor="middle" font-family="Arial" font-size="12" '
        f'fill="black">{xml_escape(caption)}</text>'
        "</svg>"
    )


def visual_aid_fallback(req: VisualAidRequest) -> dict:
    text = req.subject_text
    words = text.split()
    return {
        "id": f"visual-aid-{uuid.uuid4().hex[:12]}",
        "title": " ".join(words[:3]) or "Visual Aid",
        "description": text,
        "subject": req.subject,
        "complexity": req.complexity,
        "concepts": [
            "Visual representation of concepts",
            "Step-by-step understanding",
            "Clear diagram interpretation",
        ],
        "materials": ["White chalk", "Colored chalk (optional)", "Ruler", "Eraser"],
        "instructions": [
            "Start with the main concept and draw the central element",
            "Add supporting details and labels step by step",
            "Use different colors to highlight important parts",
            "Encourage students to explain what they see",
        ],
        "blackboardSteps": [
            "Begin by drawing the main shape or structure in the center",
            "Add the primary components with clear, simple lines",
            "Include arrows and connecting lines to show relationships",
            "Label each part clearly with easy-to-read text",
            "Add final details and ask students to explain the diagram",
        ],
        "teachingTips": [],
        "svgContent": _blackboard_svg(
            words[0] if words else "",
            f"{req.subject} - {req.grade_level}",
        ),
    }


def passage_fallback(req: PassageRequest) -> dict:
    topic = req.topic or req.subject
    return {
        "title": f"Reading About {topic}",
        "content": (
            f"This is a short reading passage about {topic} for grade {req.grade} students. "
            f"Read it aloud slowly and think about how {topic} appears in your own town, "
            "at home, and during festivals with your family."
        ),
        "gradeLevel": req.grade,
        "subject": req.subject,
        "keyPoints": [
            f"What {topic} means",
            f"Where we see {topic} in daily life",
            f"Why {topic} matters to our community",
        ],
        "discussionQuestions": [
            f"What did you learn about {topic}?",
            f"Where have you seen {topic} near your home?",
            f"How would you explain {topic} to a younger student?",
        ],
        "vocabulary": [],
    }
