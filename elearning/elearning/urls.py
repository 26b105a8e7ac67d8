"""
URL configuration for the elearning project.

API routes live under /api/, page shells at the top level and the Django
admin site under /django-admin/ so that /admin/ stays free for the
platform's own admin pages.
"""
from django.contrib import admin
from django.urls import path, include

from admin import auth, pages as admin_pages
from student import pages as student_pages

urlpatterns = [
    path('django-admin/', admin.site.urls),

    # API
    path('api/auth/', include('admin.auth_urls')),
    path('api/admin/', include('admin.urls')),
    path('api/student/', include('student.urls')),
    path('api/', include('catalog.urls')),

    # Page shells
    path('', student_pages.home, name='home'),
    path('dashboard/', student_pages.dashboard, name='student-dashboard'),
    path('login/', admin_pages.login_page, name='login'),
    path('signup/', admin_pages.signup_page, name='signup'),
    path('forgot-password/', admin_pages.forgot_password_page, name='forgot-password'),
    path('logout/', auth.logout_page, name='logout'),
    path('admin/', admin_pages.admin_dashboard, name='admin-dashboard'),
]

handler404 = 'elearning.exceptions.api_not_found'
