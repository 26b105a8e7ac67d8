"""
Role-based access control for API views, built on the session gateway.
No session answers 401, a session with the wrong role answers 403.
"""
from rest_framework import permissions
from rest_framework.exceptions import NotAuthenticated

from admin.session import get_current_user, FORBIDDEN_MESSAGE, UNAUTHORIZED_MESSAGE


class IsAuthenticatedProfile(permissions.BasePermission):
    """Any signed-in platform user (student or admin)"""
    def has_permission(self, request, view):
        if get_current_user(request) is None:
            raise NotAuthenticated(UNAUTHORIZED_MESSAGE)
        return True


class IsAdminProfile(permissions.BasePermission):
    """Only admins can access"""
    message = FORBIDDEN_MESSAGE

    def has_permission(self, request, view):
        user = get_current_user(request)
        if user is None:
            raise NotAuthenticated(UNAUTHORIZED_MESSAGE)
        return user.is_admin
