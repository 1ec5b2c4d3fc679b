from datetime import timedelta
from unittest.mock import patch

from django.test import override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from surveillance import alerts
from surveillance.models import HealthAlert, Prescription

from .factories import make_prescription, make_user


def _payload(**overrides):
    data = {
        "ageGroup": "19-40",
        "gender": "male",
        "diagnosis": "Dengue",
        "symptoms": ["High fever", "Skin rash"],
        "severity": "moderate",
        "region": "District-A",
    }
    data.update(overrides)
    return data


@override_settings(TEXTGEN_ENGINE="fallback", OUTBREAK_CASE_THRESHOLD=10, OUTBREAK_WINDOW_DAYS=7)
class PrescriptionApiTests(APITestCase):
    def setUp(self):
        self.doctor = make_user("doc@example.com", role="doctor", region="District-A")
        self.learner = make_user("learner@example.com")
        self.url = reverse("prescription-create")

    def test_doctor_creates_prescription(self):
        self.client.force_authenticate(self.doctor)

        res = self.client.post(self.url, _payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["doctorId"], self.doctor.id)
        self.assertEqual(res.data["ageGroup"], "19-40")
        self.assertEqual(res.data["symptoms"], ["High fever", "Skin rash"])
        self.assertEqual(Prescription.objects.count(), 1)

    def test_admin_may_submit(self):
        admin = make_user("admin@example.com", role="admin")
        self.client.force_authenticate(admin)

        res = self.client.post(self.url, _payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)

    def test_public_user_is_forbidden(self):
        self.client.force_authenticate(self.learner)

        res = self.client.post(self.url, _payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(Prescription.objects.count(), 0)

    def test_anonymous_is_unauthorized(self):
        res = self.client.post(self.url, _payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_missing_fields_are_rejected(self):
        self.client.force_authenticate(self.doctor)

        res = self.client.post(self.url, _payload(diagnosis="  ", ageGroup="99+"), format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("diagnosis", res.data)
        self.assertIn("ageGroup", res.data)

    def test_tenth_submission_raises_alert(self):
        self.client.force_authenticate(self.doctor)

        for _ in range(9):
            self.client.post(self.url, _payload(), format="json")
        self.assertEqual(HealthAlert.objects.count(), 0)

        res = self.client.post(self.url, _payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        alert = HealthAlert.objects.get()
        self.assertEqual(alert.case_count, 10)
        self.assertEqual(alert.disease, "Dengue")
        self.assertEqual(alert.region, "District-A")

    def test_recent_returns_own_last_twenty(self):
        other = make_user("other@example.com", role="doctor")
        for _ in range(22):
            make_prescription(self.doctor)
        make_prescription(other)
        self.client.force_authenticate(self.doctor)

        res = self.client.get(reverse("prescription-recent"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 20)
        self.assertTrue(all(row["doctorId"] == self.doctor.id for row in res.data))

    def test_recent_requires_doctor(self):
        self.client.force_authenticate(self.learner)

        res = self.client.get(reverse("prescription-recent"))

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_doctor_stats(self):
        make_prescription(self.doctor, diagnosis="Dengue")
        make_prescription(self.doctor, diagnosis="Dengue")
        make_prescription(self.doctor, diagnosis="Malaria")
        old = make_prescription(self.doctor, diagnosis="Malaria")
        Prescription.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=10))
        make_prescription(self.doctor, diagnosis="Cholera", region="District-Z")
        alerts.create_alert(disease="Dengue", region="District-A", severity="low", case_count=10, message="m")
        alerts.create_alert(disease="Dengue", region="District-Z", severity="low", case_count=10, message="m")
        self.client.force_authenticate(self.doctor)

        res = self.client.get(reverse("doctor-stats"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["weekEntries"], 4)
        self.assertLessEqual(res.data["todayEntries"], 4)
        self.assertEqual(res.data["activeAlerts"], 1)
        self.assertEqual(
            res.data["topDiseases"],
            [{"disease": "Dengue", "count": 2}, {"disease": "Malaria", "count": 2}],
        )


class AlertApiTests(APITestCase):
    def setUp(self):
        self.admin = make_user("admin@example.com", role="admin")
        self.doctor = make_user("doc@example.com", role="doctor")

    def _alert(self, region="District-A"):
        return alerts.create_alert(
            disease="Malaria", region=region, severity="high", case_count=12, message="Malaria alert"
        )

    def test_active_alerts_are_public(self):
        self._alert("District-A")
        self._alert("District-B")
        inactive = self._alert("District-A")
        alerts.deactivate(inactive.id)

        res = self.client.get(reverse("alert-active"))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 2)

        res = self.client.get(reverse("alert-active"), {"region": "District-B"})
        self.assertEqual([a["region"] for a in res.data], ["District-B"])
        self.assertTrue(res.data[0]["isActive"])
        self.assertEqual(res.data[0]["caseCount"], 12)

    def test_admin_creates_alert(self):
        self.client.force_authenticate(self.admin)

        res = self.client.post(
            reverse("alert-create"),
            {
                "disease": "Cholera",
                "region": "District-C",
                "severity": "critical",
                "caseCount": 25,
                "message": "Boil all drinking water.",
                "preventiveMeasures": ["Boil water", "Wash hands"],
                "symptoms": ["Vomiting"],
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertTrue(res.data["isActive"])
        alert = HealthAlert.objects.get()
        self.assertEqual(alert.severity, "critical")
        self.assertEqual(alert.preventive_measures, ["Boil water", "Wash hands"])

    def test_alert_with_bad_severity_is_rejected(self):
        self.client.force_authenticate(self.admin)

        res = self.client.post(
            reverse("alert-create"),
            {"disease": "Cholera", "region": "District-C", "severity": "extreme", "message": "m"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("severity", res.data)

    def test_doctor_cannot_create_alert(self):
        self.client.force_authenticate(self.doctor)

        res = self.client.post(
            reverse("alert-create"),
            {"disease": "Cholera", "region": "District-C", "severity": "low", "message": "m"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_deactivate_endpoint_is_idempotent(self):
        alert = self._alert()
        self.client.force_authenticate(self.admin)
        url = reverse("admin-alert-deactivate", args=[alert.id])

        first = self.client.post(url)
        second = self.client.post(url)

        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(second.status_code, status.HTTP_200_OK)
        self.assertFalse(second.data["isActive"])
        alert.refresh_from_db()
        self.assertFalse(alert.is_active)

    def test_deactivate_unknown_alert_is_404(self):
        self.client.force_authenticate(self.admin)

        res = self.client.post(reverse("admin-alert-deactivate", args=[424242]))

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_deactivate_requires_admin(self):
        alert = self._alert()
        self.client.force_authenticate(self.doctor)

        res = self.client.post(reverse("admin-alert-deactivate", args=[alert.id]))

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)


class AdminDashboardApiTests(APITestCase):
    def setUp(self):
        self.admin = make_user("admin@example.com", role="admin")
        self.doctor = make_user("doc@example.com", role="doctor")
        make_user("l1@example.com")
        make_user("l2@example.com")

    def test_admin_stats(self):
        for _ in range(3):
            make_prescription(self.doctor, diagnosis="Dengue", region="District-A")
        make_prescription(self.doctor, diagnosis="Malaria", region="District-B")
        alerts.create_alert(disease="Dengue", region="District-A", severity="low", case_count=10, message="m")
        stale = alerts.create_alert(disease="Dengue", region="District-C", severity="low", case_count=10, message="m")
        alerts.deactivate(stale.id)
        self.client.force_authenticate(self.admin)

        res = self.client.get(reverse("admin-stats"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        data = res.data
        self.assertEqual(data["totalPrescriptions"], 4)
        self.assertEqual(data["totalAlerts"], 1)
        self.assertEqual(data["totalLearners"], 2)
        self.assertEqual(data["totalDoctors"], 1)
        self.assertEqual(
            data["diseaseDistribution"],
            [{"name": "Dengue", "value": 3}, {"name": "Malaria", "value": 1}],
        )
        self.assertEqual(len(data["weeklyTrend"]), 7)
        self.assertEqual(data["weeklyTrend"][-1]["cases"], 4)
        self.assertEqual(
            data["regionalData"],
            [
                {"region": "District-A", "cases": 3, "alerts": 1},
                {"region": "District-B", "cases": 1, "alerts": 0},
                {"region": "District-C", "cases": 0, "alerts": 1},
            ],
        )

    def test_admin_alerts_lists_active_only(self):
        alerts.create_alert(disease="Dengue", region="District-A", severity="low", case_count=10, message="m")
        gone = alerts.create_alert(disease="Typhoid", region="District-A", severity="low", case_count=10, message="m")
        alerts.deactivate(gone.id)
        self.client.force_authenticate(self.admin)

        res = self.client.get(reverse("admin-alerts"))

        self.assertEqual([a["disease"] for a in res.data], ["Dengue"])

    def test_recent_activity_is_capped(self):
        for _ in range(55):
            make_prescription(self.doctor)
        self.client.force_authenticate(self.admin)

        res = self.client.get(reverse("admin-recent-activity"))

        self.assertEqual(len(res.data), 50)

    def test_admin_endpoints_forbid_doctors(self):
        self.client.force_authenticate(self.doctor)

        for name in ("admin-stats", "admin-alerts", "admin-recent-activity"):
            res = self.client.get(reverse(name))
            self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN, name)


class UnexpectedErrorTests(APITestCase):
    def test_unhandled_error_becomes_generic_500(self):
        with patch("surveillance.views.alerts.list_active", side_effect=RuntimeError("db down")):
            res = self.client.get(reverse("alert-active"))

        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(res.data, {"detail": "An unexpected error occurred."})
