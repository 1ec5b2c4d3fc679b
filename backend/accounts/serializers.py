from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from .models import CustomUser, level_for_points


User = get_user_model()


class UserRegistrationSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=8)

    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'username', 'password', 'region']
        read_only_fields = ['id']

    def validate_region(self, value):
        return (value or "").strip() or None

    def create(self, validated_data):
        # Self-registration only ever creates learners; doctors/admins are
        # provisioned by an administrator.
        return CustomUser.objects.create_user(
            email=validated_data['email'],
            password=validated_data['password'],
            username=validated_data['username'],
            region=validated_data.get('region'),
            role=CustomUser.Role.PUBLIC,
            is_active=True,
        )


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Login serializer:
    - checks email/password manually.
    - distinguishes a disabled account (code = "not_active") from bad credentials.
    """

    def validate(self, attrs):
        email = attrs.get("email")
        password = attrs.get("password")

        if email is None or password is None:
            raise serializers.ValidationError({
                "detail": "Email and password are required."
            })

        try:
            user = CustomUser.objects.get(email=email)
        except CustomUser.DoesNotExist:
            # Same message as SimpleJWT's default
            raise serializers.ValidationError({
                "detail": "No active account found with the given credentials"
            })

        if not user.check_password(password):
            raise serializers.ValidationError({
                "detail": "No active account found with the given credentials"
            })

        if not user.is_active:
            raise serializers.ValidationError({
                "code": "not_active",
                "role": user.role,
                "detail": "Your account is not activated yet.",
            })

        refresh = self.get_token(user)

        data = {
            "refresh": str(refresh),
            "access": str(refresh.access_token),
            "role": user.role,
            "userId": user.id,
        }

        self.user = user

        return data


class CurrentUserSerializer(serializers.ModelSerializer):
    totalPoints = serializers.IntegerField(source="total_points", read_only=True)
    level = serializers.SerializerMethodField()
    lastQuizDate = serializers.DateField(source="last_quiz_date", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "username",
            "role",
            "region",
            "totalPoints",
            "level",
            "streak",
            "lastQuizDate",
        ]

    def get_level(self, obj):
        return level_for_points(obj.total_points)


class LeaderboardEntrySerializer(serializers.ModelSerializer):
    totalPoints = serializers.IntegerField(source="total_points", read_only=True)
    level = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "username", "region", "totalPoints", "level", "streak"]

    def get_level(self, obj):
        return level_for_points(obj.total_points)
