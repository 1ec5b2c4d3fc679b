from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone


class Disease(models.Model):
    name = models.CharField(max_length=150, unique=True)
    category = models.CharField(max_length=64)
    description = models.TextField()
    symptoms = models.JSONField(default=list, blank=True)
    preventive_measures = models.JSONField(default=list, blank=True)
    treatment = models.TextField(blank=True)
    severity = models.CharField(max_length=32, blank=True)
    season = models.CharField(max_length=32, blank=True)
    icon_name = models.CharField(max_length=64, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class QuizQuestion(models.Model):
    class Difficulty(models.TextChoices):
        EASY = "easy", "Easy"
        MEDIUM = "medium", "Medium"
        HARD = "hard", "Hard"

    disease = models.ForeignKey(
        Disease,
        on_delete=models.CASCADE,
        related_name="questions",
    )
    question = models.TextField()
    options = models.JSONField()  # exactly four strings
    correct_answer = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(0), MaxValueValidator(3)]
    )
    explanation = models.TextField(blank=True)
    difficulty = models.CharField(
        max_length=8,
        choices=Difficulty.choices,
        default=Difficulty.EASY,
    )
    points = models.PositiveIntegerField(default=10)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def is_correct(self, selected_answer) -> bool:
        return selected_answer == self.correct_answer

    def __str__(self) -> str:
        return f"Q#{self.pk} ({self.disease_id}, {self.difficulty})"


class QuizAttempt(models.Model):
    """Append-only audit log of answers."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="quiz_attempts",
    )
    question = models.ForeignKey(
        QuizQuestion,
        on_delete=models.CASCADE,
        related_name="attempts",
    )
    selected_answer = models.PositiveSmallIntegerField()
    is_correct = models.BooleanField()
    points_earned = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"Attempt #{self.pk} ({'correct' if self.is_correct else 'wrong'})"


class UserProgress(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="learning_progress",
    )
    disease = models.ForeignKey(
        Disease,
        on_delete=models.CASCADE,
        related_name="progress_rows",
    )

    questions_attempted = models.PositiveIntegerField(default=0)
    questions_correct = models.PositiveIntegerField(default=0)
    total_points = models.PositiveIntegerField(default=0)
    completed = models.BooleanField(default=False)
    last_attempted_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-last_attempted_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "disease"],
                name="uniq_progress_per_user_disease",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} - {self.disease_id} ({self.questions_correct}/{self.questions_attempted})"
