from django.urls import path
from . import auth

urlpatterns = [
    path('signup/', auth.signup, name='auth-signup'),
    path('login/', auth.login, name='auth-login'),
    path('logout/', auth.logout, name='auth-logout'),
    path('session/', auth.session, name='auth-session'),
    path('forgot-password/', auth.forgot_password, name='auth-forgot-password'),
]
