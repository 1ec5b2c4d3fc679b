# backend/textgen/fallback_engine.py
from __future__ import annotations

from typing import List, Sequence

from .contracts import AlertDraft, QuestionDraft
from .engine_base import TextGenerator
from .templates import FALLBACK_ALERT_MESSAGE, FALLBACK_PREVENTIVE_MEASURES


def severity_for_case_count(case_count: int) -> str:
    if case_count > 50:
        return "high"
    if case_count > 20:
        return "medium"
    return "low"


class FallbackTextGenerator(TextGenerator):
    """
    Deterministic drafts, no external calls.
    Used on its own when no language model is configured, and by the
    model-backed engine whenever a call fails.
    """

    ENGINE_NAME = "fallback"

    def draft_alert(
        self, disease: str, case_count: int, region: str, symptoms: Sequence[str]
    ) -> AlertDraft:
        return AlertDraft(
            message=FALLBACK_ALERT_MESSAGE.format(
                disease=disease, region=region, case_count=case_count
            ),
            preventive_measures=list(FALLBACK_PREVENTIVE_MEASURES),
            severity=severity_for_case_count(case_count),
            engine=self.ENGINE_NAME,
        )

    def draft_quiz_questions(
        self,
        disease: str,
        description: str,
        symptoms: Sequence[str],
        preventive_measures: Sequence[str],
    ) -> List[QuestionDraft]:
        # No quiz content without the model; an admin retries later.
        return []
