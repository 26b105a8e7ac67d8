"""
Student page shells, rendered on the server; data changes go through the API
"""
from django.shortcuts import render

from admin.session import get_current_user
from catalog.models import Question
from catalog.services.content import recommended_videos
from student.services.stats import get_student_stats

RECENT_QUESTIONS = 5


def home(request):
    """Landing page with recommended videos"""
    user = get_current_user(request)
    return render(request, 'student/home.html', {
        'profile': user,
        'videos': recommended_videos(user),
    })


def dashboard(request):
    """Signed-in student's progress; the middleware keeps anonymous visitors out"""
    user = get_current_user(request)
    questions = Question.objects.order_by('-created_at')
    if user and user.preferred_class_level:
        questions = questions.filter(class_level=user.preferred_class_level)

    return render(request, 'student/dashboard.html', {
        'profile': user,
        'stats': get_student_stats(user) if user else None,
        'questions': questions[:RECENT_QUESTIONS],
        'videos': recommended_videos(user),
    })
