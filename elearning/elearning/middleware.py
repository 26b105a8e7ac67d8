"""
Page access middleware - redirects for the server-rendered page shells
"""
from urllib.parse import urlencode

from django.shortcuts import redirect

# Pages anyone may open
PUBLIC_ROUTES = ['/', '/login/', '/signup/', '/forgot-password/']

# Pages a signed-in user has no business on
AUTH_ONLY_ROUTES = ['/login/', '/signup/', '/forgot-password/']

# Prefixes this middleware never touches
SKIPPED_PREFIXES = ('/api/', '/static/', '/django-admin/')


def _matches(path, routes):
    for route in routes:
        if route == '/':
            if path == '/':
                return True
        elif path == route or path.startswith(route):
            return True
    return False


class PageAccessMiddleware:
    """
    Redirect anonymous visitors to the login page for protected pages and
    signed-in visitors away from login/signup pages.
    API routes enforce their own access rules and are skipped here.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = request.path

        if path.startswith(SKIPPED_PREFIXES) or '.' in path.rsplit('/', 1)[-1]:
            return self.get_response(request)

        is_authenticated = bool(getattr(request, 'user', None) and request.user.is_authenticated)

        if is_authenticated and _matches(path, AUTH_ONLY_ROUTES):
            return redirect('/dashboard/')

        if not is_authenticated and not _matches(path, PUBLIC_ROUTES):
            return redirect(f"/login/?{urlencode({'next': path})}")

        return self.get_response(request)
