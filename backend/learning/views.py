from django.shortcuts import get_object_or_404
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdmin

from .models import Disease, QuizQuestion, UserProgress
from .quizgen import generate_quiz_for
from .scoring import submit_answer
from .serializers import (
    DiseaseSerializer,
    QuizAnswerSerializer,
    QuizQuestionSerializer,
    UserProgressSerializer,
)


class DiseaseListCreateView(generics.ListCreateAPIView):
    serializer_class = DiseaseSerializer
    pagination_class = None

    def get_permissions(self):
        # GET -> anyone (public display / learning module)
        if self.request.method == "GET":
            return [AllowAny()]
        # POST -> admins author diseases
        return [IsAdmin()]

    def get_queryset(self):
        return Disease.objects.all().order_by("name")

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        disease = serializer.save()

        # Synchronous; the disease is kept even when no questions come back.
        questions = generate_quiz_for(disease)

        data = DiseaseSerializer(disease).data
        data["questionsGenerated"] = len(questions)
        return Response(data, status=status.HTTP_201_CREATED)


class DiseaseQuizView(generics.ListAPIView):
    serializer_class = QuizQuestionSerializer
    permission_classes = [AllowAny]
    pagination_class = None

    def get_queryset(self):
        disease = get_object_or_404(Disease, pk=self.kwargs["disease_id"])
        return QuizQuestion.objects.filter(disease=disease).order_by("id")


class QuizAnswerView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = QuizAnswerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = submit_answer(
            request.user,
            serializer.validated_data["questionId"],
            serializer.validated_data["selectedAnswer"],
        )
        return Response(result.to_dict(), status=status.HTTP_200_OK)


class UserProgressListView(generics.ListAPIView):
    serializer_class = UserProgressSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        return (
            UserProgress.objects.filter(user=self.request.user)
            .select_related("disease")
            .order_by("-last_attempted_at")
        )
