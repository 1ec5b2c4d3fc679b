from django.contrib import admin

from . import alerts
from .models import HealthAlert, Prescription


@admin.register(Prescription)
class PrescriptionAdmin(admin.ModelAdmin):
    list_display = ("id", "diagnosis", "region", "age_group", "gender", "severity", "doctor", "created_at")
    list_filter = ("region", "severity", "age_group", "gender", "created_at")
    search_fields = ("diagnosis", "region", "doctor__email")
    readonly_fields = ("created_at",)
    raw_id_fields = ("doctor",)

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(HealthAlert)
class HealthAlertAdmin(admin.ModelAdmin):
    list_display = ("id", "disease", "region", "severity", "case_count", "is_active", "created_at")
    list_filter = ("severity", "is_active", "region", "created_at")
    search_fields = ("disease", "region", "message")
    readonly_fields = ("created_at",)
    actions = ("deactivate_selected",)

    @admin.action(description="Deactivate selected alerts")
    def deactivate_selected(self, request, queryset):
        updated = 0
        for alert in queryset.filter(is_active=True):
            alerts.deactivate(alert.pk)
            updated += 1
        self.message_user(request, f"{updated} alert(s) deactivated.")

    def has_delete_permission(self, request, obj=None):
        return False
