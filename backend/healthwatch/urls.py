from django.contrib import admin
from django.urls import path, include

from .views import health_check

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", health_check, name="health"),

    # Auth + current user + leaderboard
    path("api/", include("accounts.urls")),

    # Prescriptions, alerts, dashboards
    path("api/", include("surveillance.urls")),

    # Diseases, quiz, progress
    path("api/", include("learning.urls")),
]
