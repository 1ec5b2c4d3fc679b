from rest_framework import serializers

from .models import Disease, QuizQuestion, UserProgress


class DiseaseSerializer(serializers.ModelSerializer):
    symptoms = serializers.ListField(
        child=serializers.CharField(max_length=255),
        required=False,
        default=list,
    )
    preventiveMeasures = serializers.ListField(
        source="preventive_measures",
        child=serializers.CharField(),
        required=False,
        default=list,
    )
    iconName = serializers.CharField(source="icon_name", required=False, allow_blank=True, default="")
    questionCount = serializers.IntegerField(source="questions.count", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Disease
        fields = [
            "id",
            "name",
            "category",
            "description",
            "symptoms",
            "preventiveMeasures",
            "treatment",
            "severity",
            "season",
            "iconName",
            "questionCount",
            "createdAt",
        ]
        read_only_fields = ["id", "questionCount", "createdAt"]

    def validate_name(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name is required.")
        return v


class QuizQuestionSerializer(serializers.ModelSerializer):
    diseaseId = serializers.IntegerField(source="disease_id", read_only=True)
    correctAnswer = serializers.IntegerField(source="correct_answer", read_only=True)

    class Meta:
        model = QuizQuestion
        fields = [
            "id",
            "diseaseId",
            "question",
            "options",
            "correctAnswer",
            "explanation",
            "difficulty",
            "points",
        ]


class QuizAnswerSerializer(serializers.Serializer):
    questionId = serializers.IntegerField(min_value=1)
    selectedAnswer = serializers.IntegerField(min_value=0, max_value=3)


class UserProgressSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="user_id", read_only=True)
    diseaseId = serializers.IntegerField(source="disease_id", read_only=True)
    diseaseName = serializers.CharField(source="disease.name", read_only=True)
    questionsAttempted = serializers.IntegerField(source="questions_attempted", read_only=True)
    questionsCorrect = serializers.IntegerField(source="questions_correct", read_only=True)
    totalPoints = serializers.IntegerField(source="total_points", read_only=True)
    lastAttemptedAt = serializers.DateTimeField(source="last_attempted_at", read_only=True)

    class Meta:
        model = UserProgress
        fields = [
            "id",
            "userId",
            "diseaseId",
            "diseaseName",
            "questionsAttempted",
            "questionsCorrect",
            "totalPoints",
            "completed",
            "lastAttemptedAt",
        ]
