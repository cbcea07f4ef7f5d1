from django.conf import settings
from rest_framework.permissions import BasePermission


class HasRole(BasePermission):
    """Allow authenticated users in the role's auth group (or superusers)."""

    role_setting = ""

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if user.is_superuser:
            return True
        role = getattr(settings, self.role_setting)
        return user.groups.filter(name=role).exists()


class IsFundAdmin(HasRole):
    role_setting = "BACKOFFICE_ADMIN_ROLE"


class IsInvestor(HasRole):
    role_setting = "BACKOFFICE_USER_ROLE"
