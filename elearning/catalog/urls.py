from django.urls import path, include
from rest_framework import routers
from .views import (
    VideoViewSet, QuestionViewSet, public_categories, admin_categories,
    latex_preview, student_videos, student_questions, recommended,
)

router = routers.DefaultRouter(trailing_slash=True)
router.include_root_view = False
router.register(r'admin/videos', VideoViewSet, basename='admin-videos')
router.register(r'admin/questions', QuestionViewSet, basename='admin-questions')

urlpatterns = [
    path('categories/', public_categories, name='categories'),
    path('admin/categories/', admin_categories, name='admin-categories'),
    path('admin/latex-preview/', latex_preview, name='admin-latex-preview'),
    path('student/videos/', student_videos, name='student-videos'),
    path('student/questions/', student_questions, name='student-questions'),
    path('videos/recommended/', recommended, name='recommended-videos'),
    path('', include(router.urls)),
]
