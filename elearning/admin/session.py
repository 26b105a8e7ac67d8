"""
Session/Auth gateway

Every role-restricted view goes through these helpers instead of poking at
request.user directly. They work with both Django HttpRequest objects
(page shells) and DRF Request objects (API views).
"""
from rest_framework.authentication import SessionAuthentication
from rest_framework.exceptions import NotAuthenticated, PermissionDenied

from admin.auth_backend import profile_for

UNAUTHORIZED_MESSAGE = 'Unauthorized'
FORBIDDEN_MESSAGE = 'Forbidden - Admin access required'


class ProfileSessionAuthentication(SessionAuthentication):
    """
    Django session authentication that answers 401 (not 403) when no
    session is present, so "not signed in" and "wrong role" stay distinct.
    """
    def authenticate_header(self, request):
        return 'Session'


def get_server_session(request):
    """
    Return {"user": <UserProfile>, "session_key": <str>} for the signed-in
    user, or None when there is no valid session.
    """
    profile = profile_for(getattr(request, 'user', None))
    if profile is None:
        return None
    session = getattr(request, 'session', None)
    return {
        'user': profile,
        'session_key': session.session_key if session is not None else None,
    }


def get_current_user(request):
    """The signed-in UserProfile or None"""
    session = get_server_session(request)
    return session['user'] if session else None


def is_admin(request):
    user = get_current_user(request)
    return bool(user and user.is_admin)


def require_auth(request):
    """Return the current session, raising NotAuthenticated without one"""
    session = get_server_session(request)
    if session is None:
        raise NotAuthenticated(UNAUTHORIZED_MESSAGE)
    return session


def require_admin(request):
    """Return the current session, raising unless it belongs to an ADMIN"""
    session = require_auth(request)
    if not session['user'].is_admin:
        raise PermissionDenied(FORBIDDEN_MESSAGE)
    return session
