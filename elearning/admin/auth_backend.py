"""
Custom authentication backend for the UserProfile model
"""
from django.contrib.auth.backends import BaseBackend
from django.contrib.auth.hashers import check_password
from django.contrib.auth.models import User as DjangoUser
from django.core.exceptions import ValidationError
from admin.models import UserProfile

USERNAME_PREFIX = 'user_'


def django_user_for(profile):
    """
    Get or create the django.contrib.auth user that carries the session
    for a profile. The two are linked by the username "user_<profile id>".
    """
    django_user, created = DjangoUser.objects.get_or_create(
        username=f"{USERNAME_PREFIX}{profile.id}",
        defaults={
            'email': profile.email,
            'first_name': profile.name[:150],
        }
    )
    if created:
        django_user.set_unusable_password()
        django_user.save(update_fields=['password'])
    django_user._profile = profile
    return django_user


def profile_for(django_user):
    """Return the UserProfile behind a django.contrib.auth user, or None"""
    if django_user is None or not getattr(django_user, 'is_authenticated', False):
        return None
    profile = getattr(django_user, '_profile', None)
    if profile is not None:
        return profile
    profile_id = django_user.username[len(USERNAME_PREFIX):] if django_user.username.startswith(USERNAME_PREFIX) else None
    if not profile_id:
        return None
    try:
        profile = UserProfile.objects.get(id=profile_id)
    except (UserProfile.DoesNotExist, ValidationError):
        return None
    django_user._profile = profile
    return profile


class ProfileBackend(BaseBackend):
    """
    Authenticate using the UserProfile model from the admin app
    """

    def authenticate(self, request, username=None, password=None, **kwargs):
        """
        Authenticate user by email and password
        """
        email = kwargs.get('email', username)
        if not email or not password:
            return None

        try:
            profile = UserProfile.objects.get(email__iexact=str(email).strip())
        except UserProfile.DoesNotExist:
            return None

        if not check_password(password, profile.password_hash):
            return None

        return django_user_for(profile)

    def get_user(self, user_id):
        """
        Get user by ID with its profile attached
        """
        try:
            user = DjangoUser.objects.get(pk=user_id)
        except DjangoUser.DoesNotExist:
            return None
        profile_for(user)
        return user
