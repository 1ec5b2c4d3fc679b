"""
Read-side aggregates for the doctor and admin dashboards.
Everything is computed on read; nothing here is stored.
"""
from collections import Counter, defaultdict
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.db.models import Count
from django.utils import timezone

from . import alerts
from .models import HealthAlert, Prescription

User = get_user_model()

TOP_DISEASES_LIMIT = 5
ADMIN_PRESCRIPTION_SAMPLE = 1000
ADMIN_ALERT_SAMPLE = 100
DISTRIBUTION_LIMIT = 5
REGIONAL_LIMIT = 10
TREND_DAYS = 7


def _local_midnight(now=None):
    now = timezone.localtime(now or timezone.now())
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def top_diseases(region=None, limit=TOP_DISEASES_LIMIT):
    qs = Prescription.objects.all()
    if region:
        qs = qs.filter(region=region)
    rows = (
        qs.values("diagnosis")
        .annotate(count=Count("id"))
        .order_by("-count", "diagnosis")[:limit]
    )
    return [{"disease": r["diagnosis"], "count": r["count"]} for r in rows]


def doctor_stats(user, now=None):
    now = now or timezone.now()
    own = Prescription.objects.filter(doctor=user)
    region = user.region or None

    return {
        "todayEntries": own.filter(created_at__gte=_local_midnight(now)).count(),
        "weekEntries": own.filter(created_at__gte=now - timedelta(days=7)).count(),
        "activeAlerts": alerts.list_active(region).count(),
        "topDiseases": top_diseases(region),
    }


def _format_day(day):
    return f"{day:%b} {day.day}"


def weekly_trend(prescriptions, now=None, days=TREND_DAYS):
    today = _local_midnight(now)
    trend = []
    for offset in range(days - 1, -1, -1):
        start = today - timedelta(days=offset)
        end = start + timedelta(days=1)
        cases = sum(1 for p in prescriptions if start <= p.created_at < end)
        trend.append({"date": _format_day(start), "cases": cases})
    return trend


def admin_stats(now=None):
    prescriptions = list(
        Prescription.objects.order_by("-created_at", "-id")[:ADMIN_PRESCRIPTION_SAMPLE]
    )
    recent_alerts = list(HealthAlert.objects.order_by("-created_at", "-id")[:ADMIN_ALERT_SAMPLE])

    distribution = Counter(p.diagnosis for p in prescriptions)
    disease_distribution = [
        {"name": name, "value": value}
        for name, value in sorted(distribution.items(), key=lambda kv: (-kv[1], kv[0]))[
            :DISTRIBUTION_LIMIT
        ]
    ]

    regions = defaultdict(lambda: {"cases": 0, "alerts": 0})
    for p in prescriptions:
        regions[p.region]["cases"] += 1
    for a in recent_alerts:
        regions[a.region]["alerts"] += 1
    regional_data = sorted(
        ({"region": region, **counts} for region, counts in regions.items()),
        key=lambda row: (-row["cases"], row["region"]),
    )[:REGIONAL_LIMIT]

    return {
        "totalPrescriptions": len(prescriptions),
        "totalAlerts": sum(1 for a in recent_alerts if a.is_active),
        "totalLearners": User.objects.filter(role="public").count(),
        "totalDoctors": User.objects.filter(role="doctor").count(),
        "diseaseDistribution": disease_distribution,
        "weeklyTrend": weekly_trend(prescriptions, now=now),
        "regionalData": regional_data,
    }


def admin_active_alerts():
    recent = HealthAlert.objects.order_by("-created_at", "-id")[:ADMIN_ALERT_SAMPLE]
    return [a for a in recent if a.is_active]
