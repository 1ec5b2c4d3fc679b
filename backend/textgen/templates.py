# backend/textgen/templates.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptTemplate:
    system: str
    user: str
    max_tokens: int

    def render(self, **values) -> str:
        return self.user.format(**values)


PROMPTS: dict[str, PromptTemplate] = {
    "health_alert": PromptTemplate(
        system=(
            "You are a public health expert who communicates in clear, simple "
            "language accessible to rural populations."
        ),
        user=(
            "You are a public health expert. Generate a health alert for the "
            "following disease outbreak:\n"
            "\n"
            "Disease: {disease}\n"
            "Case Count: {case_count}\n"
            "Region: {region}\n"
            "Common Symptoms: {symptoms}\n"
            "\n"
            "Please provide:\n"
            "1. A clear, concise alert message (2-3 sentences) in simple language "
            "suitable for rural populations\n"
            "2. A list of 4-5 preventive measures\n"
            "3. Severity assessment (low, medium, high, or critical)\n"
            "\n"
            "Respond in JSON format with this structure:\n"
            "{{\n"
            '  "message": "string",\n'
            '  "preventiveMeasures": ["string"],\n'
            '  "severity": "string"\n'
            "}}"
        ),
        max_tokens=1000,
    ),
    "quiz_questions": PromptTemplate(
        system=(
            "You are a health education expert who creates clear, educational "
            "quiz questions."
        ),
        user=(
            "You are a health education expert. Create 5 quiz questions about "
            "{disease}.\n"
            "\n"
            "Disease Information:\n"
            "- Description: {description}\n"
            "- Symptoms: {symptoms}\n"
            "- Preventive Measures: {preventive_measures}\n"
            "\n"
            "Create 5 multiple-choice questions:\n"
            "- 2 easy questions (10 points each)\n"
            "- 2 medium questions (20 points each)\n"
            "- 1 hard question (30 points)\n"
            "\n"
            "Each question should have 4 options with only one correct answer.\n"
            "Include an explanation for the correct answer.\n"
            "\n"
            "Respond in JSON format with this structure:\n"
            "{{\n"
            '  "questions": [\n'
            "    {{\n"
            '      "question": "string",\n'
            '      "options": ["string", "string", "string", "string"],\n'
            '      "correctAnswer": number (0-3),\n'
            '      "explanation": "string",\n'
            '      "difficulty": "easy|medium|hard",\n'
            '      "points": number\n'
            "    }}\n"
            "  ]\n"
            "}}"
        ),
        max_tokens=2000,
    ),
}


ALERT_SEVERITIES = ("low", "medium", "high", "critical")

FALLBACK_PREVENTIVE_MEASURES = (
    "Maintain good personal hygiene",
    "Drink clean, boiled water",
    "Seek medical attention if symptoms appear",
    "Avoid contact with infected individuals",
)

FALLBACK_ALERT_MESSAGE = (
    "Health Alert: {disease} outbreak detected in {region}. "
    "{case_count} cases have been reported. Please take necessary precautions."
)

# Used when the model answers but leaves the message out.
DEFAULT_ALERT_MESSAGE = "{disease} outbreak detected in {region}. {case_count} cases reported."

DEFAULT_ALERT_SEVERITY = "medium"

QUIZ_QUESTION_COUNT = 5

POINTS_BY_DIFFICULTY = {
    "easy": 10,
    "medium": 20,
    "hard": 30,
}
