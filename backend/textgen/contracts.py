# backend/textgen/contracts.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class AlertDraft:
    message: str
    preventive_measures: List[str]
    severity: str             # low | medium | high | critical
    engine: str               # "openai" | "fallback"


@dataclass(frozen=True)
class QuestionDraft:
    question: str
    options: List[str]
    correct_answer: int       # 0..3
    explanation: str = ""
    difficulty: str = "easy"  # easy | medium | hard
    points: int = 10

    def to_model_fields(self) -> Dict[str, Any]:
        return {
            "question": self.question,
            "options": list(self.options),
            "correct_answer": int(self.correct_answer),
            "explanation": self.explanation,
            "difficulty": self.difficulty,
            "points": int(self.points),
        }
