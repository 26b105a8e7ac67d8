"""
Platform analytics for the admin dashboard.

Every figure is computed with aggregate queries at request time.
"""
from datetime import timedelta

from django.db.models import Count, Q
from django.utils import timezone

from admin.models import UserProfile, ROLE_STUDENT
from catalog.models import Video, Question
from student.models import QuestionAttempt, VideoProgress, Doubt, DOUBT_PENDING, DOUBT_RESOLVED
from student.services.stats import accuracy, attempt_counts

RECENT_WINDOW_DAYS = 7
TOP_PERFORMERS_LIMIT = 10


def _overview():
    total_attempts, correct_attempts = attempt_counts(QuestionAttempt.objects.all())
    doubts = Doubt.objects.aggregate(
        pending=Count('id', filter=Q(status=DOUBT_PENDING)),
        resolved=Count('id', filter=Q(status=DOUBT_RESOLVED)),
    )
    return {
        'total_students': UserProfile.objects.filter(role=ROLE_STUDENT).count(),
        'total_videos': Video.objects.count(),
        'total_questions': Question.objects.count(),
        'total_attempts': total_attempts,
        'correct_attempts': correct_attempts,
        'overall_accuracy': accuracy(correct_attempts, total_attempts),
        'total_video_watches': VideoProgress.objects.filter(completed=True).count(),
        'pending_doubts': doubts['pending'] or 0,
        'resolved_doubts': doubts['resolved'] or 0,
    }


def _recent_activity(now):
    since = now - timedelta(days=RECENT_WINDOW_DAYS)
    return {
        'new_students': UserProfile.objects.filter(role=ROLE_STUDENT, created_at__gte=since).count(),
        'question_attempts': QuestionAttempt.objects.filter(attempted_at__gte=since).count(),
        'videos_watched': VideoProgress.objects.filter(completed=True, last_watched_at__gte=since).count(),
    }


def _distribution():
    questions_by_subject = (
        Question.objects.values('subject')
        .annotate(count=Count('id'))
        .order_by('subject')
    )
    videos_by_class = (
        Video.objects.values('class_level')
        .annotate(count=Count('id'))
        .order_by('class_level')
    )
    return {
        'questions_by_subject': [
            {'subject': row['subject'], 'count': row['count']} for row in questions_by_subject
        ],
        'videos_by_class': [
            {'class_level': row['class_level'], 'count': row['count']} for row in videos_by_class
        ],
    }


def _top_performers(limit=TOP_PERFORMERS_LIMIT):
    """Users ranked by correct attempts; equal counts are ordered by user id"""
    rows = (
        QuestionAttempt.objects.filter(is_correct=True)
        .values('user_id', 'user__name', 'user__email')
        .annotate(correct_count=Count('id'))
        .order_by('-correct_count', 'user_id')[:limit]
    )
    return [
        {
            'user_id': str(row['user_id']),
            'user_name': row['user__name'],
            'user_email': row['user__email'],
            'correct_count': row['correct_count'],
        }
        for row in rows
    ]


def get_platform_analytics(now=None):
    """
    Returns:
    {
        "overview": {...},
        "recent_activity": {...},     # trailing 7 days from now
        "distribution": {"questions_by_subject": [...], "videos_by_class": [...]},
        "top_performers": [...]       # at most 10
    }
    """
    now = now or timezone.now()
    return {
        'overview': _overview(),
        'recent_activity': _recent_activity(now),
        'distribution': _distribution(),
        'top_performers': _top_performers(),
    }
