"""
Attempt/accuracy/video-watch figures, platform wide and per student
"""
from django.db.models import Count, Q

from admin.models import UserProfile, ROLE_STUDENT
from catalog.models import Video, Question
from student.models import QuestionAttempt, VideoProgress, Doubt, DOUBT_PENDING, DOUBT_RESOLVED


def accuracy(correct, total):
    """Percentage of correct answers rounded to an int, 0 when nothing was attempted"""
    if not total:
        return 0
    # half-up, Python's round() would send 50.5 to 50
    return int(correct * 100 / total + 0.5)


def attempt_counts(queryset):
    """(total, correct) attempts in a QuestionAttempt queryset"""
    totals = queryset.aggregate(
        total=Count('id'),
        correct=Count('id', filter=Q(is_correct=True)),
    )
    return totals['total'] or 0, totals['correct'] or 0


def get_student_stats(user):
    """Progress figures for one student, used by the student dashboard"""
    questions_solved, correct_answers = attempt_counts(QuestionAttempt.objects.filter(user=user))
    doubts = Doubt.objects.filter(user=user).aggregate(
        pending=Count('id', filter=Q(status=DOUBT_PENDING)),
        resolved=Count('id', filter=Q(status=DOUBT_RESOLVED)),
    )

    return {
        'total_videos': Video.objects.count(),
        'videos_watched': VideoProgress.objects.filter(user=user, completed=True).count(),
        'total_questions': Question.objects.count(),
        'questions_solved': questions_solved,
        'correct_answers': correct_answers,
        'accuracy': accuracy(correct_answers, questions_solved),
        'pending_doubts': doubts['pending'] or 0,
        'resolved_doubts': doubts['resolved'] or 0,
    }


def students_with_stats():
    """Every student, newest first, with attempt and video-watch figures"""
    students = (
        UserProfile.objects.filter(role=ROLE_STUDENT)
        .annotate(
            total_attempts=Count('attempts', distinct=True),
            correct_attempts=Count('attempts', filter=Q(attempts__is_correct=True), distinct=True),
            videos_watched=Count('video_progress', filter=Q(video_progress__completed=True), distinct=True),
        )
        .order_by('-created_at')
    )

    rows = []
    for student in students:
        rows.append({
            'id': str(student.id),
            'name': student.name,
            'email': student.email,
            'image': student.image,
            'preferred_class_level': student.preferred_class_level,
            'preferred_batch': student.preferred_batch,
            'created_at': student.created_at,
            'stats': {
                'total_attempts': student.total_attempts,
                'correct_attempts': student.correct_attempts,
                'accuracy': accuracy(student.correct_attempts, student.total_attempts),
                'videos_watched': student.videos_watched,
            },
        })
    return rows
