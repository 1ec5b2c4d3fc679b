from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

User = get_user_model()


class RegistrationTests(APITestCase):
    def test_register_always_creates_learner(self):
        res = self.client.post(
            reverse("register"),
            {
                "email": "new@example.com",
                "username": "newbie",
                "password": "pass12345!",
                "region": " District-A ",
                "role": "admin",
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertNotIn("password", res.data)
        user = User.objects.get(email="new@example.com")
        self.assertEqual(user.role, "public")
        self.assertEqual(user.region, "District-A")
        self.assertEqual(user.total_points, 0)
        self.assertEqual(user.level, 1)

    def test_duplicate_email(self):
        User.objects.create_user(email="dup@example.com", password="pass12345!", username="dup")

        res = self.client.post(
            reverse("register"),
            {"email": "dup@example.com", "username": "dup2", "password": "pass12345!"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("email", res.data)


class LoginTests(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            email="doc@example.com", password="pass12345!", username="doc", role="doctor"
        )

    def test_login_returns_tokens_and_role(self):
        res = self.client.post(
            reverse("login"),
            {"email": "doc@example.com", "password": "pass12345!"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertIn("access", res.data)
        self.assertIn("refresh", res.data)
        self.assertEqual(res.data["role"], "doctor")
        self.assertEqual(res.data["userId"], self.user.id)

    def test_wrong_password(self):
        res = self.client.post(
            reverse("login"),
            {"email": "doc@example.com", "password": "nope-nope"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_access_token_authenticates(self):
        login = self.client.post(
            reverse("login"),
            {"email": "doc@example.com", "password": "pass12345!"},
            format="json",
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")

        res = self.client.get(reverse("current-user"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["email"], "doc@example.com")


class CurrentUserTests(APITestCase):
    def test_level_follows_points(self):
        user = User.objects.create_user(
            email="learner@example.com", password="pass12345!", username="learner", total_points=250
        )
        self.client.force_authenticate(user)

        res = self.client.get(reverse("current-user"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["totalPoints"], 250)
        self.assertEqual(res.data["level"], 3)
        self.assertEqual(res.data["role"], "public")

    def test_requires_login(self):
        res = self.client.get(reverse("current-user"))

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)


class LevelCacheTests(APITestCase):
    def test_level_recomputed_when_points_are_edited(self):
        user = User.objects.create_user(email="edit@example.com", password="pass12345!", username="edit")

        user.total_points = 250
        user.save()

        user.refresh_from_db()
        self.assertEqual(user.level, 3)

    def test_partial_save_of_points_includes_level(self):
        user = User.objects.create_user(email="part@example.com", password="pass12345!", username="part")

        user.total_points = 120
        user.save(update_fields=["total_points"])

        user.refresh_from_db()
        self.assertEqual(user.level, 2)


class LeaderboardTests(APITestCase):
    def test_top_ten_by_points(self):
        for i in range(12):
            User.objects.create_user(
                email=f"u{i}@example.com", password="pass12345!", username=f"u{i}", total_points=i * 15
            )
        User.objects.create_user(
            email="gone@example.com", password="pass12345!", username="gone", total_points=9999, is_active=False
        )

        res = self.client.get(reverse("leaderboard"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data), 10)
        self.assertEqual(res.data[0]["username"], "u11")
        self.assertEqual(res.data[0]["totalPoints"], 165)
        self.assertEqual(res.data[0]["level"], 2)
        points = [row["totalPoints"] for row in res.data]
        self.assertEqual(points, sorted(points, reverse=True))
        self.assertNotIn("gone", [row["username"] for row in res.data])

    def test_ties_break_on_level_then_id(self):
        first = User.objects.create_user(email="a@example.com", password="pass12345!", username="a", total_points=300)
        second = User.objects.create_user(email="b@example.com", password="pass12345!", username="b", total_points=300)
        third = User.objects.create_user(email="c@example.com", password="pass12345!", username="c", total_points=300)
        # stored level out of step with points, as rows written before the cache existed
        User.objects.filter(pk=third.pk).update(level=9)

        res = self.client.get(reverse("leaderboard"))

        self.assertEqual([row["id"] for row in res.data], [third.id, first.id, second.id])
        self.assertEqual({row["totalPoints"] for row in res.data}, {300})
