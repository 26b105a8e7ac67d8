"""
Helpers shared by the API test suites
"""
from django.contrib.auth.hashers import make_password

from admin.auth_backend import django_user_for
from admin.models import UserProfile, ROLE_ADMIN, ROLE_STUDENT

TEST_PASSWORD = 'testpass123'


def make_profile(email, role=ROLE_STUDENT, name=None, **extra):
    return UserProfile.objects.create(
        name=name or email.split('@')[0].title(),
        email=email,
        password_hash=make_password(TEST_PASSWORD),
        role=role,
        **extra
    )


def make_admin(email='admin@test.com', **extra):
    return make_profile(email, role=ROLE_ADMIN, **extra)


def sign_in(client, profile):
    """Attach a session for `profile` to a test client"""
    client.force_login(django_user_for(profile), backend='admin.auth_backend.ProfileBackend')
