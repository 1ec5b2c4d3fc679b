from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin, BaseUserManager
from django.db import models
from django.utils import timezone


POINTS_PER_LEVEL = 100


def level_for_points(total_points):
    """Level is a pure function of points: floor(points / 100) + 1."""
    return max(int(total_points or 0), 0) // POINTS_PER_LEVEL + 1


# User manager
class CustomUserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('An email address is required')
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', CustomUser.Role.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')
        return self.create_user(email, password, **extra_fields)


class CustomUser(AbstractBaseUser, PermissionsMixin):
    class Role(models.TextChoices):
        PUBLIC = "public", "Public"
        DOCTOR = "doctor", "Doctor"
        ADMIN = "admin", "Admin"

    email = models.EmailField(unique=True)
    username = models.CharField(max_length=150)
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.PUBLIC)
    region = models.CharField(max_length=150, blank=True, null=True)

    # Gamification
    total_points = models.PositiveIntegerField(default=0)
    level = models.PositiveIntegerField(default=1)  # cache of level_for_points(total_points)
    streak = models.PositiveIntegerField(default=0)
    last_quiz_date = models.DateField(blank=True, null=True)

    is_staff = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    date_joined = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    def save(self, *args, **kwargs):
        # level always follows total_points
        self.level = level_for_points(self.total_points)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'total_points' in update_fields and 'level' not in update_fields:
            kwargs['update_fields'] = [*update_fields, 'level']
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.email} ({self.role})"
