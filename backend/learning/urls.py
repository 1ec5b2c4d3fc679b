from django.urls import path

from .views import (
    DiseaseListCreateView,
    DiseaseQuizView,
    QuizAnswerView,
    UserProgressListView,
)

urlpatterns = [
    # Diseases
    path("diseases/", DiseaseListCreateView.as_view(), name="disease-list-create"),

    # Quiz
    path("quiz/answer/", QuizAnswerView.as_view(), name="quiz-answer"),
    path("quiz/<int:disease_id>/", DiseaseQuizView.as_view(), name="quiz-by-disease"),

    # Progress
    path("progress/", UserProgressListView.as_view(), name="progress-list"),
]
