import logging

from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdmin, IsDoctor

from . import alerts, stats
from .detector import check_outbreak
from .models import Prescription
from .serializers import HealthAlertSerializer, PrescriptionSerializer

logger = logging.getLogger(__name__)

RECENT_PRESCRIPTIONS_LIMIT = 20
RECENT_ACTIVITY_LIMIT = 50


# ---------------------------------------------------------------------------
# Prescriptions
# ---------------------------------------------------------------------------

class PrescriptionCreateView(generics.CreateAPIView):
    serializer_class = PrescriptionSerializer
    permission_classes = [IsDoctor]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        prescription = serializer.save(doctor=request.user)

        # Blocks until the alert (if any) is drafted and stored.
        check_outbreak(prescription)

        return Response(PrescriptionSerializer(prescription).data, status=status.HTTP_201_CREATED)


class RecentPrescriptionsView(generics.ListAPIView):
    serializer_class = PrescriptionSerializer
    permission_classes = [IsDoctor]
    pagination_class = None

    def get_queryset(self):
        return (
            Prescription.objects.filter(doctor=self.request.user)
            .order_by("-created_at", "-id")[:RECENT_PRESCRIPTIONS_LIMIT]
        )


class DoctorStatsView(APIView):
    permission_classes = [IsDoctor]

    def get(self, request):
        return Response(stats.doctor_stats(request.user))


# ---------------------------------------------------------------------------
# Health alerts
# ---------------------------------------------------------------------------

class ActiveAlertsView(generics.ListAPIView):
    serializer_class = HealthAlertSerializer
    permission_classes = [AllowAny]
    pagination_class = None

    def get_queryset(self):
        region = (self.request.query_params.get("region") or "").strip() or None
        return alerts.list_active(region)


class HealthAlertCreateView(generics.CreateAPIView):
    serializer_class = HealthAlertSerializer
    permission_classes = [IsAdmin]

    def perform_create(self, serializer):
        data = serializer.validated_data
        serializer.instance = alerts.create_alert(
            disease=data["disease"],
            region=data["region"],
            severity=data["severity"],
            case_count=data.get("case_count", 0),
            message=data["message"],
            preventive_measures=data.get("preventive_measures"),
            symptoms=data.get("symptoms"),
        )


# ---------------------------------------------------------------------------
# Admin dashboards
# ---------------------------------------------------------------------------

class AdminStatsView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        return Response(stats.admin_stats())


class AdminAlertsView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        return Response(HealthAlertSerializer(stats.admin_active_alerts(), many=True).data)


class AdminRecentActivityView(generics.ListAPIView):
    serializer_class = PrescriptionSerializer
    permission_classes = [IsAdmin]
    pagination_class = None

    def get_queryset(self):
        return Prescription.objects.order_by("-created_at", "-id")[:RECENT_ACTIVITY_LIMIT]


@api_view(["POST"])
@permission_classes([IsAdmin])
def deactivate_alert(request, pk):
    """
    Switch an alert off (admin only).
    Calling it again on an inactive alert succeeds and changes nothing.
    """
    alert = alerts.deactivate(pk)
    return Response(HealthAlertSerializer(alert).data, status=status.HTTP_200_OK)
