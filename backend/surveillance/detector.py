import logging
from datetime import timedelta

from django.conf import settings

from textgen import get_text_generator

from . import alerts
from .models import Prescription, case_key

logger = logging.getLogger(__name__)


def _threshold():
    return int(getattr(settings, "OUTBREAK_CASE_THRESHOLD", 10))


def _window():
    return timedelta(days=int(getattr(settings, "OUTBREAK_WINDOW_DAYS", 7)))


def recent_region_cases(prescription):
    """Prescriptions in the same region inside the trailing window that ends at `prescription`."""
    end = prescription.created_at
    return Prescription.objects.filter(
        region=prescription.region,
        created_at__range=(end - _window(), end),
    )


def recent_matching_cases(prescription):
    """Same as recent_region_cases, restricted to the same diagnosis (case-insensitive)."""
    return recent_region_cases(prescription).filter(
        diagnosis_key=case_key(prescription.diagnosis),
    )


def _distinct_symptoms(cases):
    seen = []
    for symptoms in cases.order_by("created_at", "id").values_list("symptoms", flat=True):
        for s in symptoms or []:
            if s not in seen:
                seen.append(s)
    return seen


def check_outbreak(prescription, generator=None):
    """
    Runs after a prescription is stored.
    Returns the HealthAlert that was created, or None when nothing crossed
    the threshold (or a duplicate was suppressed).
    """
    cases = recent_matching_cases(prescription)
    same_disease_count = cases.count()

    logger.debug(
        "Outbreak check | diagnosis=%s | region=%s | count=%s | threshold=%s",
        prescription.diagnosis,
        prescription.region,
        same_disease_count,
        _threshold(),
    )

    if same_disease_count < _threshold():
        return None

    if getattr(settings, "OUTBREAK_SUPPRESS_DUPLICATE_ALERTS", False) and alerts.has_active_alert(
        prescription.diagnosis, prescription.region
    ):
        logger.info(
            "Threshold crossed but an active alert exists | diagnosis=%s | region=%s",
            prescription.diagnosis,
            prescription.region,
        )
        return None

    symptoms = _distinct_symptoms(recent_region_cases(prescription))
    generator = generator or get_text_generator()
    draft = generator.draft_alert(
        prescription.diagnosis,
        same_disease_count,
        prescription.region,
        symptoms,
    )

    return alerts.create_alert(
        disease=prescription.diagnosis,
        region=prescription.region,
        severity=draft.severity,
        case_count=same_disease_count,
        message=draft.message,
        preventive_measures=draft.preventive_measures,
        symptoms=symptoms,
    )
