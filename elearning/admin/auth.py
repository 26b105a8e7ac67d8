"""
Authentication endpoints - signup, login, logout, session and the
forgot-password stub. Sessions are plain Django sessions carried by the
django.contrib.auth user linked to each profile.
"""
import logging

from django.contrib.auth import authenticate, login as django_login, logout as django_logout
from django.shortcuts import redirect
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .auth_backend import django_user_for, profile_for
from .serializers import UserProfileSerializer, SignupSerializer
from .session import get_server_session

logger = logging.getLogger(__name__)

BACKEND_PATH = 'admin.auth_backend.ProfileBackend'
RESET_MESSAGE = 'If an account exists for this email, password reset instructions have been sent'


def start_session(request, profile):
    """Log the profile in on this request and stamp last_login"""
    django_login(request, django_user_for(profile), backend=BACKEND_PATH)
    profile.last_login = timezone.now()
    profile.save(update_fields=['last_login'])


@api_view(['POST'])
@permission_classes([AllowAny])
def signup(request):
    """
    Request body:
    {
        "name": "Asha Roy",
        "email": "asha@example.com",
        "password": "secret123"
    }
    """
    serializer = SignupSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    profile = serializer.save()
    start_session(request, profile)
    logger.info(f"New student signed up: {profile.email}")
    return Response(
        {'success': True, 'user': UserProfileSerializer(profile).data},
        status=status.HTTP_201_CREATED
    )


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """
    Request body:
    {
        "email": "user@example.com",
        "password": "password123"
    }

    Response:
    {
        "success": true,
        "user": {"id": "uuid", "name": "...", "email": "...", "role": "STUDENT|ADMIN", ...}
    }
    """
    email = request.data.get('email')
    password = request.data.get('password')

    if not email or not password:
        return Response(
            {'error': 'Email and password are required'},
            status=status.HTTP_400_BAD_REQUEST
        )

    django_user = authenticate(request, email=email.strip().lower(), password=password)
    if django_user is None:
        logger.warning(f"Failed login for {email}")
        return Response(
            {'error': 'Invalid email or password'},
            status=status.HTTP_401_UNAUTHORIZED
        )

    profile = profile_for(django_user)
    start_session(request, profile)
    return Response({'success': True, 'user': UserProfileSerializer(profile).data})


@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    django_logout(request)
    return Response({'success': True, 'message': 'Logged out successfully'})


@api_view(['GET'])
@permission_classes([AllowAny])
def session(request):
    """GET /api/auth/session/ - {"user": {...}} or {"user": null}"""
    current = get_server_session(request)
    if current is None:
        return Response({'user': None})
    return Response({'user': UserProfileSerializer(current['user']).data})


@api_view(['POST'])
@permission_classes([AllowAny])
def forgot_password(request):
    """
    Email delivery is not configured, so no reset link is ever sent. The
    answer is the same whether or not the account exists.
    """
    email = (request.data.get('email') or '').strip()
    if not email:
        return Response({'error': 'Email is required'}, status=status.HTTP_400_BAD_REQUEST)
    logger.info(f"Password reset requested for {email}; email delivery is not configured")
    return Response({'success': True, 'message': RESET_MESSAGE})


def logout_page(request):
    """GET /logout/ - end the session and go back to the landing page"""
    django_logout(request)
    return redirect('/')
