from django.urls import path
from . import views

urlpatterns = [
    path('attempts/', views.attempts, name='student-attempts'),
    path('video-progress/', views.video_progress, name='student-video-progress'),
    path('doubts/', views.doubts, name='student-doubts'),
    path('stats/', views.stats, name='student-stats'),
    path('profile/', views.profile, name='student-profile'),
]
