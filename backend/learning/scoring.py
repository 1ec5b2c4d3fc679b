"""
Quiz scoring: one answer produces an attempt row, a per-disease progress
update and a new global point total for the user.

All of it is written in a single transaction so a failure part-way through
never leaves points under-credited.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import F
from django.utils import timezone
from rest_framework.exceptions import NotFound

from accounts.models import level_for_points

from .models import QuizAttempt, QuizQuestion, UserProgress

logger = logging.getLogger(__name__)

User = get_user_model()


@dataclass(frozen=True)
class AnswerResult:
    is_correct: bool
    points_earned: int
    total_points: int
    level: int

    def to_dict(self):
        return {
            "isCorrect": self.is_correct,
            "pointsEarned": self.points_earned,
            "totalPoints": self.total_points,
            "level": self.level,
        }


def score_answer(question, selected_answer):
    """(is_correct, points_earned) for one answer."""
    is_correct = question.is_correct(selected_answer)
    return is_correct, (question.points if is_correct else 0)


def next_streak(current_streak, last_day, today):
    if last_day == today:
        return max(current_streak, 1)
    if last_day is not None and last_day == today - timedelta(days=1):
        return current_streak + 1
    return 1


def _disease_completed(user, disease_id) -> bool:
    total = QuizQuestion.objects.filter(disease_id=disease_id).count()
    if total == 0:
        return False
    solved = (
        QuizAttempt.objects.filter(user=user, question__disease_id=disease_id, is_correct=True)
        .values("question_id")
        .distinct()
        .count()
    )
    return solved >= total


def _upsert_progress(user, disease_id, is_correct, points_earned, now):
    progress, created = UserProgress.objects.select_for_update().get_or_create(
        user=user,
        disease_id=disease_id,
        defaults={
            "questions_attempted": 1,
            "questions_correct": 1 if is_correct else 0,
            "total_points": points_earned,
            "completed": False,
            "last_attempted_at": now,
        },
    )
    if not created:
        UserProgress.objects.filter(pk=progress.pk).update(
            questions_attempted=F("questions_attempted") + 1,
            questions_correct=F("questions_correct") + (1 if is_correct else 0),
            total_points=F("total_points") + points_earned,
            last_attempted_at=now,
        )
        progress.refresh_from_db()

    if is_correct and not progress.completed and _disease_completed(user, disease_id):
        progress.completed = True
        progress.save(update_fields=["completed"])
    return progress


def submit_answer(user, question_id, selected_answer) -> AnswerResult:
    question = QuizQuestion.objects.filter(pk=question_id).first()
    if question is None:
        raise NotFound("Question not found.")

    is_correct, points_earned = score_answer(question, selected_answer)
    now = timezone.now()
    today = timezone.localdate(now)

    with transaction.atomic():
        QuizAttempt.objects.create(
            user=user,
            question=question,
            selected_answer=selected_answer,
            is_correct=is_correct,
            points_earned=points_earned,
        )

        _upsert_progress(user, question.disease_id, is_correct, points_earned, now)

        locked = User.objects.select_for_update().get(pk=user.pk)
        locked.total_points = locked.total_points + points_earned
        locked.level = level_for_points(locked.total_points)
        locked.streak = next_streak(locked.streak, locked.last_quiz_date, today)
        locked.last_quiz_date = today
        locked.save(update_fields=["total_points", "level", "streak", "last_quiz_date", "updated_at"])

    logger.debug(
        "Answer scored | user=%s | question=%s | correct=%s | points=%s | total=%s",
        user.pk,
        question.pk,
        is_correct,
        points_earned,
        locked.total_points,
    )

    # Keep the caller's instance in step with the stored row.
    user.total_points = locked.total_points
    user.level = locked.level
    user.streak = locked.streak
    user.last_quiz_date = locked.last_quiz_date

    return AnswerResult(
        is_correct=is_correct,
        points_earned=points_earned,
        total_points=locked.total_points,
        level=locked.level,
    )
