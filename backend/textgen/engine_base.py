# backend/textgen/engine_base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from .contracts import AlertDraft, QuestionDraft


class TextGenerator(ABC):
    ENGINE_NAME = "base"

    @abstractmethod
    def draft_alert(
        self, disease: str, case_count: int, region: str, symptoms: Sequence[str]
    ) -> AlertDraft:
        raise NotImplementedError

    @abstractmethod
    def draft_quiz_questions(
        self,
        disease: str,
        description: str,
        symptoms: Sequence[str],
        preventive_measures: Sequence[str],
    ) -> List[QuestionDraft]:
        raise NotImplementedError
