from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import CustomUser


# ================================
# Custom User Admin
# ================================
@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    model = CustomUser
    list_display = ('id', 'email', 'username', 'role', 'region', 'total_points', 'level', 'is_active', 'is_staff')
    list_filter = ('role', 'is_active', 'is_staff')

    fieldsets = (
        (None, {'fields': ('email', 'username', 'password', 'role', 'region')}),
        ('Learning', {'fields': ('total_points', 'level', 'streak', 'last_quiz_date')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'username', 'role', 'region', 'password1', 'password2'),
        }),
    )

    readonly_fields = ('level',)
    search_fields = ('email', 'username', 'region')
    ordering = ('email',)
