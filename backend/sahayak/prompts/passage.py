"""Prompt template for reading passages."""

PASSAGE_PROMPT = """Generate a reading passage for grade {grade} students studying {subject}.
Topic: {topic}
Language: {language}
Cultural Context: {cultural_context}

Requirements:
- Appropriate length for grade level
- Include cultural references and examples
- Use grade-appropriate vocabulary
- Include 2-3 key concepts or learning points
- End with 2-3 discussion questions

Respond with ONLY a JSON object in this format:
{{
  "title": "Passage title",
  "content": "The actual passage text",
  "gradeLevel": "{grade}",
  "subject": "{subject}",
  "keyPoints": ["Point 1", "Point 2", "Point 3"],
  "discussionQuestions": ["Question 1?", "Question 2?"],
  "vocabulary": ["Word 1", "Word 2"]
}}"""


def build_passage_prompt(req) -> str:
    return PASSAGE_PROMPT.format(
        grade=req.grade,
        subject=req.subject,
        topic=req.topic or req.subject,
        language=req.language,
        cultural_context=req.cultural_context,
    )
