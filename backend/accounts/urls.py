from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import (
    UserRegistrationView,
    CustomLoginView,
    CurrentUserView,
    LeaderboardView,
)


urlpatterns = [

    # -------------------------------------------------------------------------
    # Authentication & Registration
    # -------------------------------------------------------------------------
    path("auth/register/", UserRegistrationView.as_view(), name="register"),
    path("auth/login/", CustomLoginView.as_view(), name="login"),
    path("auth/token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),

    # -------------------------------------------------------------------------
    # Current user
    # -------------------------------------------------------------------------
    path("auth/user/", CurrentUserView.as_view(), name="current-user"),

    # -------------------------------------------------------------------------
    # Leaderboard (public)
    # -------------------------------------------------------------------------
    path("leaderboard/", LeaderboardView.as_view(), name="leaderboard"),
]
