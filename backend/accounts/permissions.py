from rest_framework.permissions import BasePermission


def is_admin(user) -> bool:
    # Real admin through Django flags or through role=admin
    return bool(
        getattr(user, "is_staff", False)
        or getattr(user, "is_superuser", False)
        or getattr(user, "role", "") == "admin"
    )


def is_doctor(user) -> bool:
    if is_admin(user):
        return True
    return getattr(user, "role", "") == "doctor"


class IsDoctor(BasePermission):
    """Doctors submit prescriptions; admins are allowed too."""

    message = "Only doctors can access this resource."

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and is_doctor(request.user))


class IsAdmin(BasePermission):
    message = "Admin access required."

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and is_admin(request.user))
