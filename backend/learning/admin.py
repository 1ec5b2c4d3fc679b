from django.contrib import admin

from .models import Disease, QuizAttempt, QuizQuestion, UserProgress


class QuizQuestionInline(admin.TabularInline):
    model = QuizQuestion
    extra = 0
    fields = ("question", "difficulty", "points", "correct_answer")

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Disease)
class DiseaseAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "category", "severity", "season", "created_at")
    list_filter = ("category", "severity", "season")
    search_fields = ("name", "description")
    readonly_fields = ("created_at",)
    inlines = (QuizQuestionInline,)


@admin.register(QuizQuestion)
class QuizQuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "disease", "difficulty", "points", "correct_answer")
    list_filter = ("difficulty", "disease")
    search_fields = ("question", "explanation")
    raw_id_fields = ("disease",)

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(QuizAttempt)
class QuizAttemptAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "question", "selected_answer", "is_correct", "points_earned", "created_at")
    list_filter = ("is_correct", "created_at")
    search_fields = ("user__email",)
    readonly_fields = ("created_at",)
    raw_id_fields = ("user", "question")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(UserProgress)
class UserProgressAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "disease", "questions_attempted", "questions_correct", "total_points", "completed")
    list_filter = ("completed", "disease")
    search_fields = ("user__email", "disease__name")
    raw_id_fields = ("user", "disease")
