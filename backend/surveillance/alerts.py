"""
Alert lifecycle: alerts are created active, listed while active and
switched off explicitly. Rows are never deleted.
"""
import logging

from rest_framework.exceptions import NotFound

from .models import HealthAlert, case_key

logger = logging.getLogger(__name__)


def create_alert(
    *,
    disease,
    region,
    severity,
    case_count,
    message,
    preventive_measures=None,
    symptoms=None,
):
    alert = HealthAlert.objects.create(
        disease=disease,
        region=region,
        severity=severity,
        case_count=case_count,
        message=message,
        preventive_measures=list(preventive_measures or []),
        symptoms=list(symptoms or []),
        is_active=True,
    )
    logger.info(
        "Health alert created | id=%s | disease=%s | region=%s | cases=%s | severity=%s",
        alert.id,
        alert.disease,
        alert.region,
        alert.case_count,
        alert.severity,
    )
    return alert


def list_active(region=None):
    qs = HealthAlert.objects.filter(is_active=True)
    if region:
        qs = qs.filter(region=region)
    return qs.order_by("-created_at", "-id")


def has_active_alert(disease, region) -> bool:
    return HealthAlert.objects.filter(
        is_active=True,
        disease_key=case_key(disease),
        region=region,
    ).exists()


def deactivate(alert_id):
    """Idempotent: deactivating an inactive alert is a no-op."""
    alert = HealthAlert.objects.filter(pk=alert_id).first()
    if alert is None:
        raise NotFound("Alert not found.")

    if alert.is_active:
        alert.is_active = False
        alert.save(update_fields=["is_active"])
        logger.info("Health alert deactivated | id=%s", alert.id)
    return alert
