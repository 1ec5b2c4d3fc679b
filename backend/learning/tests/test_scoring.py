from datetime import date, timedelta

from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase
from rest_framework.exceptions import NotFound

from accounts.models import level_for_points
from learning.models import Disease, QuizAttempt, QuizQuestion, UserProgress
from learning.scoring import next_streak, score_answer, submit_answer

User = get_user_model()


def make_disease(name="Dengue"):
    return Disease.objects.create(
        name=name,
        category="communicable",
        description=f"{name} description",
        symptoms=["Fever"],
        preventive_measures=["Use nets"],
    )


def make_question(disease, correct_answer=1, points=10, difficulty="easy"):
    return QuizQuestion.objects.create(
        disease=disease,
        question="Which one is right?",
        options=["A", "B", "C", "D"],
        correct_answer=correct_answer,
        explanation="Because.",
        difficulty=difficulty,
        points=points,
    )


class LevelRuleTests(SimpleTestCase):
    def test_level_for_points(self):
        self.assertEqual(level_for_points(0), 1)
        self.assertEqual(level_for_points(99), 1)
        self.assertEqual(level_for_points(100), 2)
        self.assertEqual(level_for_points(105), 2)
        self.assertEqual(level_for_points(250), 3)
        self.assertEqual(level_for_points(None), 1)


class StreakRuleTests(SimpleTestCase):
    def test_next_streak(self):
        today = date(2026, 10, 18)

        self.assertEqual(next_streak(0, None, today), 1)
        self.assertEqual(next_streak(3, today, today), 3)
        self.assertEqual(next_streak(3, today - timedelta(days=1), today), 4)
        self.assertEqual(next_streak(3, today - timedelta(days=2), today), 1)


class ScoreAnswerTests(TestCase):
    def test_points_only_for_correct_answers(self):
        question = make_question(make_disease(), correct_answer=2, points=20)

        for selected in range(4):
            is_correct, points = score_answer(question, selected)
            self.assertEqual(is_correct, selected == 2)
            self.assertEqual(points, 20 if selected == 2 else 0)


class SubmitAnswerTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(email="learner@example.com", password="pass12345!", username="learner")
        self.disease = make_disease()
        self.question = make_question(self.disease, correct_answer=1, points=10)

    def test_correct_answer_crosses_level(self):
        User.objects.filter(pk=self.user.pk).update(total_points=95, level=1)
        self.user.refresh_from_db()

        result = submit_answer(self.user, self.question.id, 1)

        self.assertTrue(result.is_correct)
        self.assertEqual(result.points_earned, 10)
        self.assertEqual(result.total_points, 105)
        self.assertEqual(result.level, 2)
        self.user.refresh_from_db()
        self.assertEqual(self.user.total_points, 105)
        self.assertEqual(self.user.level, 2)
        self.assertEqual(self.user.level, level_for_points(self.user.total_points))

    def test_wrong_answer_earns_nothing(self):
        result = submit_answer(self.user, self.question.id, 3)

        self.assertFalse(result.is_correct)
        self.assertEqual(result.points_earned, 0)
        self.user.refresh_from_db()
        self.assertEqual(self.user.total_points, 0)
        self.assertEqual(self.user.level, 1)

    def test_attempts_are_logged(self):
        submit_answer(self.user, self.question.id, 1)
        submit_answer(self.user, self.question.id, 0)

        attempts = list(QuizAttempt.objects.filter(user=self.user).order_by("id"))
        self.assertEqual([a.is_correct for a in attempts], [True, False])
        self.assertEqual([a.points_earned for a in attempts], [10, 0])
        for a in attempts:
            self.assertEqual(a.is_correct, a.selected_answer == self.question.correct_answer)

    def test_progress_is_created_then_incremented(self):
        submit_answer(self.user, self.question.id, 0)
        progress = UserProgress.objects.get(user=self.user, disease=self.disease)
        self.assertEqual(progress.questions_attempted, 1)
        self.assertEqual(progress.questions_correct, 0)
        self.assertEqual(progress.total_points, 0)
        self.assertFalse(progress.completed)

        submit_answer(self.user, self.question.id, 1)
        progress.refresh_from_db()
        self.assertEqual(progress.questions_attempted, 2)
        self.assertEqual(progress.questions_correct, 1)
        self.assertEqual(progress.total_points, 10)
        self.assertEqual(UserProgress.objects.filter(user=self.user).count(), 1)

    def test_progress_completes_when_every_question_solved(self):
        second = make_question(self.disease, correct_answer=0, points=20, difficulty="medium")

        submit_answer(self.user, self.question.id, 1)
        progress = UserProgress.objects.get(user=self.user, disease=self.disease)
        self.assertFalse(progress.completed)

        submit_answer(self.user, second.id, 0)
        progress.refresh_from_db()
        self.assertTrue(progress.completed)

    def test_progress_is_scoped_per_disease(self):
        other = make_question(make_disease("Malaria"), correct_answer=2, points=30)

        submit_answer(self.user, self.question.id, 1)
        submit_answer(self.user, other.id, 2)

        rows = {p.disease.name: p.total_points for p in UserProgress.objects.filter(user=self.user)}
        self.assertEqual(rows, {"Dengue": 10, "Malaria": 30})
        self.user.refresh_from_db()
        self.assertEqual(self.user.total_points, 40)

    def test_streak_starts_on_first_answer(self):
        submit_answer(self.user, self.question.id, 1)
        submit_answer(self.user, self.question.id, 1)

        self.user.refresh_from_db()
        self.assertEqual(self.user.streak, 1)
        self.assertIsNotNone(self.user.last_quiz_date)

    def test_unknown_question(self):
        with self.assertRaises(NotFound):
            submit_answer(self.user, 99999, 0)
        self.assertEqual(QuizAttempt.objects.count(), 0)
