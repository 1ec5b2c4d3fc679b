from django.conf import settings
from django.db import models


def case_key(text):
    """Matching key for case-insensitive lookups (full Unicode case folding)."""
    return (text or "").strip().casefold()


class Prescription(models.Model):
    """Anonymized case record submitted by a doctor. Never updated or deleted."""

    class AgeGroup(models.TextChoices):
        INFANT = "0-5", "0-5 years"
        CHILD = "6-12", "6-12 years"
        TEEN = "13-18", "13-18 years"
        ADULT = "19-40", "19-40 years"
        MIDDLE_AGED = "41-60", "41-60 years"
        SENIOR = "60+", "60+ years"

    class Gender(models.TextChoices):
        MALE = "male", "Male"
        FEMALE = "female", "Female"
        OTHER = "other", "Other"

    class Severity(models.TextChoices):
        MILD = "mild", "Mild"
        MODERATE = "moderate", "Moderate"
        SEVERE = "severe", "Severe"

    doctor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="prescriptions_submitted",
    )

    region = models.CharField(max_length=150, db_index=True)
    diagnosis = models.CharField(max_length=255)
    diagnosis_key = models.CharField(max_length=255, db_index=True, editable=False, default="")
    age_group = models.CharField(max_length=8, choices=AgeGroup.choices)
    gender = models.CharField(max_length=8, choices=Gender.choices)
    severity = models.CharField(
        max_length=16,
        choices=Severity.choices,
        default=Severity.MODERATE,
    )
    symptoms = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def save(self, *args, **kwargs):
        self.diagnosis_key = case_key(self.diagnosis)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"Rx #{self.pk} {self.diagnosis} ({self.region})"


class HealthAlert(models.Model):
    class Severity(models.TextChoices):
        LOW = "low", "Low"
        MEDIUM = "medium", "Medium"
        HIGH = "high", "High"
        CRITICAL = "critical", "Critical"

    disease = models.CharField(max_length=255)
    disease_key = models.CharField(max_length=255, db_index=True, editable=False, default="")
    region = models.CharField(max_length=150, db_index=True)
    severity = models.CharField(max_length=16, choices=Severity.choices)
    case_count = models.PositiveIntegerField(default=0)
    message = models.TextField()
    preventive_measures = models.JSONField(default=list, blank=True)
    symptoms = models.JSONField(default=list, blank=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def save(self, *args, **kwargs):
        self.disease_key = case_key(self.disease)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.disease} in {self.region} ({self.severity})"
