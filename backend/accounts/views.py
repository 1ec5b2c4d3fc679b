from django.contrib.auth import get_user_model
from rest_framework import generics
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView

from .serializers import (
    CurrentUserSerializer,
    CustomTokenObtainPairSerializer,
    LeaderboardEntrySerializer,
    UserRegistrationSerializer,
)

User = get_user_model()

LEADERBOARD_SIZE = 10


# Registration (learners only)
class UserRegistrationView(generics.CreateAPIView):
    queryset = User.objects.all()
    serializer_class = UserRegistrationSerializer
    permission_classes = [AllowAny]


class CustomLoginView(TokenObtainPairView):
    serializer_class = CustomTokenObtainPairSerializer


class CurrentUserView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = CurrentUserSerializer(request.user)
        return Response(serializer.data)


class LeaderboardView(generics.ListAPIView):
    permission_classes = [AllowAny]
    serializer_class = LeaderboardEntrySerializer
    pagination_class = None

    def get_queryset(self):
        return (
            User.objects.filter(is_active=True)
            .order_by("-total_points", "-level", "id")[:LEADERBOARD_SIZE]
        )
