"""
Page shells for sign-in, sign-up, password reset and the admin dashboard
"""
import logging

from django.contrib.auth import authenticate
from django.shortcuts import render, redirect
from django.utils.http import url_has_allowed_host_and_scheme

from .auth import start_session, RESET_MESSAGE
from .auth_backend import profile_for
from .serializers import SignupSerializer
from .services.analytics import get_platform_analytics
from .session import get_current_user, is_admin

logger = logging.getLogger(__name__)


def _landing_url(request, profile):
    next_url = request.POST.get('next') or request.GET.get('next')
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return next_url
    return '/admin/' if profile.is_admin else '/dashboard/'


def login_page(request):
    context = {'next': request.GET.get('next', '')}
    if request.method == 'POST':
        email = (request.POST.get('email') or '').strip().lower()
        django_user = authenticate(request, email=email, password=request.POST.get('password'))
        if django_user is not None:
            profile = profile_for(django_user)
            start_session(request, profile)
            return redirect(_landing_url(request, profile))
        context.update({'error': 'Invalid email or password', 'email': email, 'next': request.POST.get('next', '')})
    return render(request, 'elearning_admin/login.html', context)


def signup_page(request):
    context = {}
    if request.method == 'POST':
        serializer = SignupSerializer(data=request.POST)
        if serializer.is_valid():
            profile = serializer.save()
            start_session(request, profile)
            logger.info(f"New student signed up: {profile.email}")
            return redirect('/dashboard/')
        context.update({'errors': serializer.errors, 'name': request.POST.get('name', ''), 'email': request.POST.get('email', '')})
    return render(request, 'elearning_admin/signup.html', context)


def forgot_password_page(request):
    context = {}
    if request.method == 'POST':
        email = (request.POST.get('email') or '').strip()
        if email:
            logger.info(f"Password reset requested for {email}; email delivery is not configured")
        context['message'] = RESET_MESSAGE
    return render(request, 'elearning_admin/forgot_password.html', context)


def admin_dashboard(request):
    """Admins only; students landing here are sent to their own dashboard"""
    profile = get_current_user(request)
    if profile is None:
        return redirect(f"/login/?next={request.path}")
    if not is_admin(request):
        return redirect('/dashboard/')
    return render(request, 'elearning_admin/dashboard.html', {
        'profile': profile,
        'analytics': get_platform_analytics(),
    })
