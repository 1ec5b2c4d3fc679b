# backend/textgen/openai_engine.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from openai import OpenAI, OpenAIError

from .contracts import AlertDraft, QuestionDraft
from .engine_base import TextGenerator
from .fallback_engine import FallbackTextGenerator, severity_for_case_count
from .templates import (
    ALERT_SEVERITIES,
    DEFAULT_ALERT_MESSAGE,
    DEFAULT_ALERT_SEVERITY,
    FALLBACK_PREVENTIVE_MEASURES,
    POINTS_BY_DIFFICULTY,
    PROMPTS,
    QUIZ_QUESTION_COUNT,
)

logger = logging.getLogger(__name__)

# Failures that end in the deterministic fallback.
DRAFT_ERRORS = (OpenAIError, ValueError, TypeError, KeyError, IndexError, AttributeError)


class OpenAITextGenerator(TextGenerator):
    ENGINE_NAME = "openai"

    def __init__(
        self,
        model: str,
        api_key: str,
        timeout: Optional[float] = None,
        client: Optional[OpenAI] = None,
        fallback: Optional[TextGenerator] = None,
    ):
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self._client = client
        self.fallback = fallback or FallbackTextGenerator()

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def _complete_json(self, prompt_key: str, **values) -> Dict[str, Any]:
        template = PROMPTS[prompt_key]
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": template.system},
                {"role": "user", "content": template.render(**values)},
            ],
            response_format={"type": "json_object"},
            max_completion_tokens=template.max_tokens,
        )
        content = response.choices[0].message.content or "{}"
        result = json.loads(content)
        if not isinstance(result, dict):
            raise ValueError(f"expected a JSON object, got {type(result).__name__}")
        return result

    # ------------------------------------------------------------------
    # Alerts
    # ------------------------------------------------------------------
    def draft_alert(
        self, disease: str, case_count: int, region: str, symptoms: Sequence[str]
    ) -> AlertDraft:
        try:
            result = self._complete_json(
                "health_alert",
                disease=disease,
                case_count=case_count,
                region=region,
                symptoms=", ".join(symptoms),
            )
            return self._alert_from_result(result, disease, case_count, region)
        except DRAFT_ERRORS as exc:
            logger.warning(
                "Alert drafting failed, using fallback | disease=%s | region=%s | error=%s",
                disease,
                region,
                exc,
            )
            return self.fallback.draft_alert(disease, case_count, region, symptoms)

    def _alert_from_result(self, result, disease, case_count, region) -> AlertDraft:
        message = str(result.get("message") or "").strip()
        if not message:
            message = DEFAULT_ALERT_MESSAGE.format(
                disease=disease, region=region, case_count=case_count
            )

        measures = result.get("preventiveMeasures")
        if isinstance(measures, list):
            measures = [str(m).strip() for m in measures if str(m).strip()]
        else:
            measures = None
        if not measures:
            measures = list(FALLBACK_PREVENTIVE_MEASURES)

        severity = str(result.get("severity") or DEFAULT_ALERT_SEVERITY).strip().lower()
        if severity not in ALERT_SEVERITIES:
            severity = severity_for_case_count(case_count)

        return AlertDraft(
            message=message,
            preventive_measures=measures,
            severity=severity,
            engine=self.ENGINE_NAME,
        )

    # ------------------------------------------------------------------
    # Quiz questions
    # ------------------------------------------------------------------
    def draft_quiz_questions(
        self,
        disease: str,
        description: str,
        symptoms: Sequence[str],
        preventive_measures: Sequence[str],
    ) -> List[QuestionDraft]:
        try:
            result = self._complete_json(
                "quiz_questions",
                disease=disease,
                description=description,
                symptoms=", ".join(symptoms),
                preventive_measures=", ".join(preventive_measures),
            )
            raw_questions = result.get("questions") or []
            if not isinstance(raw_questions, list):
                raise ValueError("'questions' is not a list")
        except DRAFT_ERRORS as exc:
            logger.warning(
                "Quiz drafting failed, no questions generated | disease=%s | error=%s",
                disease,
                exc,
            )
            return []

        drafts = []
        for raw in raw_questions[:QUIZ_QUESTION_COUNT]:
            draft = parse_question(raw)
            if draft is None:
                logger.info("Dropping malformed quiz question | disease=%s | raw=%s", disease, raw)
                continue
            drafts.append(draft)
        return drafts


def parse_question(raw) -> Optional[QuestionDraft]:
    """
    Turn one model-produced question into a QuestionDraft.
    Returns None when the item cannot be stored as a four-option question.
    """
    if not isinstance(raw, dict):
        return None

    text = str(raw.get("question") or "").strip()
    options = raw.get("options")
    if not text or not isinstance(options, list) or len(options) != 4:
        return None
    options = [str(o).strip() for o in options]
    if not all(options):
        return None

    try:
        correct = int(raw.get("correctAnswer"))
    except (TypeError, ValueError):
        return None
    if correct < 0 or correct > 3:
        return None

    difficulty = str(raw.get("difficulty") or "easy").strip().lower()
    if difficulty not in POINTS_BY_DIFFICULTY:
        difficulty = "easy"

    try:
        points = int(raw.get("points"))
    except (TypeError, ValueError):
        points = POINTS_BY_DIFFICULTY[difficulty]
    if points <= 0:
        points = POINTS_BY_DIFFICULTY[difficulty]

    return QuestionDraft(
        question=text,
        options=options,
        correct_answer=correct,
        explanation=str(raw.get("explanation") or "").strip(),
        difficulty=difficulty,
        points=points,
    )
