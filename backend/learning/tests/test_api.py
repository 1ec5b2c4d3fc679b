from unittest.mock import Mock, patch

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from learning.models import Disease, QuizQuestion, UserProgress
from learning.seed_data import DISEASES
from textgen import QuestionDraft

from .test_scoring import make_disease, make_question

User = get_user_model()


def _user(email, role="public", **extra):
    return User.objects.create_user(email=email, password="pass12345!", username=email.split("@")[0], role=role, **extra)


def _disease_payload(**overrides):
    data = {
        "name": "Chikungunya",
        "category": "communicable",
        "description": "Viral disease spread by mosquitoes.",
        "symptoms": ["Fever", "Joint pain"],
        "preventiveMeasures": ["Use repellents"],
        "treatment": "Rest and fluids.",
        "severity": "moderate",
        "season": "monsoon",
    }
    data.update(overrides)
    return data


def _quiz_generator(count=2):
    generator = Mock()
    generator.draft_quiz_questions.return_value = [
        QuestionDraft(
            question=f"Question {i}?",
            options=["A", "B", "C", "D"],
            correct_answer=i % 4,
            explanation="",
            difficulty="easy",
            points=10,
        )
        for i in range(count)
    ]
    return generator


@override_settings(TEXTGEN_ENGINE="fallback")
class DiseaseApiTests(APITestCase):
    def setUp(self):
        self.admin = _user("admin@example.com", role="admin")
        self.url = reverse("disease-list-create")

    def test_list_is_public_and_sorted(self):
        make_disease("Malaria")
        make_disease("Cholera")

        res = self.client.get(self.url)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([d["name"] for d in res.data], ["Cholera", "Malaria"])

    def test_admin_creates_disease_with_quiz(self):
        self.client.force_authenticate(self.admin)
        generator = _quiz_generator(count=5)

        with patch("learning.quizgen.get_text_generator", return_value=generator):
            res = self.client.post(self.url, _disease_payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["questionsGenerated"], 5)
        disease = Disease.objects.get(name="Chikungunya")
        self.assertEqual(disease.preventive_measures, ["Use repellents"])
        self.assertEqual(disease.questions.count(), 5)
        generator.draft_quiz_questions.assert_called_once_with(
            "Chikungunya",
            "Viral disease spread by mosquitoes.",
            ["Fever", "Joint pain"],
            ["Use repellents"],
        )

    def test_disease_is_kept_when_generation_yields_nothing(self):
        self.client.force_authenticate(self.admin)

        res = self.client.post(self.url, _disease_payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["questionsGenerated"], 0)
        self.assertTrue(Disease.objects.filter(name="Chikungunya").exists())

    def test_duplicate_name_is_rejected(self):
        make_disease("Chikungunya")
        self.client.force_authenticate(self.admin)

        res = self.client.post(self.url, _disease_payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("name", res.data)

    def test_non_admin_is_forbidden(self):
        self.client.force_authenticate(_user("doc@example.com", role="doctor"))

        res = self.client.post(self.url, _disease_payload(), format="json")

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Disease.objects.exists())


class QuizApiTests(APITestCase):
    def setUp(self):
        self.user = _user("learner@example.com")
        self.disease = make_disease()
        self.question = make_question(self.disease, correct_answer=1, points=10)

    def test_questions_for_disease(self):
        make_question(make_disease("Malaria"))

        res = self.client.get(reverse("quiz-by-disease", args=[self.disease.id]))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 1)
        self.assertEqual(res.data[0]["options"], ["A", "B", "C", "D"])
        self.assertEqual(res.data[0]["diseaseId"], self.disease.id)

    def test_questions_for_unknown_disease(self):
        res = self.client.get(reverse("quiz-by-disease", args=[4040]))

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_answer_updates_user(self):
        User.objects.filter(pk=self.user.pk).update(total_points=95)
        self.user.refresh_from_db()
        self.client.force_authenticate(self.user)

        res = self.client.post(
            reverse("quiz-answer"),
            {"questionId": self.question.id, "selectedAnswer": 1},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            res.data,
            {"isCorrect": True, "pointsEarned": 10, "totalPoints": 105, "level": 2},
        )

    def test_answer_unknown_question(self):
        self.client.force_authenticate(self.user)

        res = self.client.post(reverse("quiz-answer"), {"questionId": 777, "selectedAnswer": 0}, format="json")

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_answer_validation(self):
        self.client.force_authenticate(self.user)

        res = self.client.post(
            reverse("quiz-answer"),
            {"questionId": self.question.id, "selectedAnswer": 5},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("selectedAnswer", res.data)

    def test_answer_requires_login(self):
        res = self.client.post(reverse("quiz-answer"), {"questionId": self.question.id, "selectedAnswer": 1}, format="json")

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_progress_lists_own_rows(self):
        other = _user("other@example.com")
        UserProgress.objects.create(user=other, disease=self.disease, questions_attempted=3)
        self.client.force_authenticate(self.user)
        self.client.post(reverse("quiz-answer"), {"questionId": self.question.id, "selectedAnswer": 1}, format="json")

        res = self.client.get(reverse("progress-list"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 1)
        row = res.data[0]
        self.assertEqual(row["diseaseName"], "Dengue")
        self.assertEqual(row["questionsAttempted"], 1)
        self.assertEqual(row["questionsCorrect"], 1)
        self.assertEqual(row["totalPoints"], 10)
        self.assertTrue(row["completed"])


@override_settings(TEXTGEN_ENGINE="fallback")
class SeedDiseasesCommandTests(TestCase):
    def test_seed_is_idempotent(self):
        call_command("seed_diseases", stdout=Mock())
        call_command("seed_diseases", stdout=Mock())

        self.assertEqual(Disease.objects.count(), len(DISEASES))
        dengue = Disease.objects.get(name="Dengue")
        self.assertEqual(dengue.season, "monsoon")
        self.assertEqual(len(dengue.preventive_measures), 5)

    def test_with_quiz_drafts_missing_questions(self):
        generator = _quiz_generator(count=2)

        with patch("learning.quizgen.get_text_generator", return_value=generator):
            call_command("seed_diseases", "--with-quiz", stdout=Mock())

        self.assertEqual(QuizQuestion.objects.count(), 2 * len(DISEASES))
