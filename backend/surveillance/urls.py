from django.urls import path

from .views import (
    PrescriptionCreateView,
    RecentPrescriptionsView,
    DoctorStatsView,
    ActiveAlertsView,
    HealthAlertCreateView,
    AdminStatsView,
    AdminAlertsView,
    AdminRecentActivityView,
    deactivate_alert,
)

urlpatterns = [
    # Prescriptions
    path("prescriptions/", PrescriptionCreateView.as_view(), name="prescription-create"),
    path("prescriptions/recent/", RecentPrescriptionsView.as_view(), name="prescription-recent"),

    # Doctor dashboard
    path("doctor/stats/", DoctorStatsView.as_view(), name="doctor-stats"),

    # Alerts
    path("alerts/", HealthAlertCreateView.as_view(), name="alert-create"),
    path("alerts/active/", ActiveAlertsView.as_view(), name="alert-active"),

    # Admin dashboard
    path("admin/stats/", AdminStatsView.as_view(), name="admin-stats"),
    path("admin/alerts/", AdminAlertsView.as_view(), name="admin-alerts"),
    path("admin/alerts/<int:pk>/deactivate/", deactivate_alert, name="admin-alert-deactivate"),
    path("admin/recent-activity/", AdminRecentActivityView.as_view(), name="admin-recent-activity"),
]
