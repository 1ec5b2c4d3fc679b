from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase


class HealthCheckTests(APITestCase):
    @override_settings(TEXTGEN_ENGINE="openai", OPENAI_API_KEY="")
    def test_reports_fallback_without_key(self):
        res = self.client.get(reverse("health"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["status"], "ok")
        self.assertEqual(res.data["textgen"], "fallback")
        self.assertFalse(res.data["llm_configured"])
