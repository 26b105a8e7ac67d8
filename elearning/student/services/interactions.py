"""
Interaction services - answer submission, video progress and doubts
"""
import logging
import uuid

from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from catalog.models import Video, Question
from student.models import QuestionAttempt, VideoProgress, Doubt, DOUBT_PENDING, DOUBT_RESOLVED

logger = logging.getLogger(__name__)

DOUBT_STATUSES = (DOUBT_PENDING, DOUBT_RESOLVED)


def _get_or_404(model, pk, message):
    try:
        return model.objects.get(pk=pk)
    except (model.DoesNotExist, DjangoValidationError, ValueError):
        raise NotFound(message)


def _uuid_param(value, name):
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise ValidationError({name: 'Must be a valid UUID'})


# ============ Attempts ============

def submit_attempt(user, question_id, selected_answer, time_taken=None):
    """
    Record one answer. Correctness is decided here, against the stored
    answer, and never changes afterwards. Repeated submissions are all kept.
    """
    question = _get_or_404(Question, question_id, 'Question not found')
    is_correct = selected_answer == question.correct_answer

    attempt = QuestionAttempt.objects.create(
        user=user,
        question=question,
        selected_answer=selected_answer,
        is_correct=is_correct,
        time_taken=time_taken or None,
    )
    logger.info(f"Attempt {attempt.id} by {user.id} on {question.id}: {'correct' if is_correct else 'wrong'}")

    return {
        'attempt': attempt,
        'is_correct': is_correct,
        'correct_answer': question.correct_answer,
        'explanation': question.explanation,
    }


def list_attempts(user, question_id=None):
    attempts = QuestionAttempt.objects.filter(user=user)
    if question_id:
        attempts = attempts.filter(question_id=_uuid_param(question_id, 'question_id'))
    return attempts


# ============ Video progress ============

def mark_video_watched(user, video_id):
    """
    Upsert the (user, video) progress row as completed.
    Returns (progress, created).
    """
    video = _get_or_404(Video, video_id, 'Video not found')

    existing = VideoProgress.objects.filter(user=user, video=video).first()
    if existing:
        existing.completed = True
        existing.last_watched_at = timezone.now()
        existing.save(update_fields=['completed', 'last_watched_at'])
        return existing, False

    progress = VideoProgress.objects.create(
        user=user,
        video=video,
        completed=True,
        watched_duration=0,
    )
    return progress, True


def get_progress(user, video_id):
    """Progress row for one video, or None"""
    return VideoProgress.objects.filter(user=user, video_id=_uuid_param(video_id, 'video_id')).first()


def list_progress(user):
    return VideoProgress.objects.filter(user=user)


# ============ Doubts ============

def submit_doubt(user, title, description, question_id=None, video_id=None):
    """Open a new PENDING doubt, optionally linked to a question or video"""
    question = _get_or_404(Question, question_id, 'Question not found') if question_id else None
    video = _get_or_404(Video, video_id, 'Video not found') if video_id else None

    doubt = Doubt.objects.create(
        user=user,
        title=title,
        description=description,
        question=question,
        video=video,
        status=DOUBT_PENDING,
    )
    logger.info(f"Doubt {doubt.id} submitted by {user.id}")
    return doubt


def list_user_doubts(user):
    return Doubt.objects.filter(user=user).order_by('-created_at')


def list_all_doubts():
    return Doubt.objects.select_related('user').order_by('-created_at')


def respond_to_doubt(doubt_id, response, status=None):
    """
    Store an admin response. The doubt becomes RESOLVED unless a status is
    given explicitly; there is no transition back from RESOLVED otherwise.
    """
    if not response or not str(response).strip():
        raise ValidationError({'response': 'Response is required'})
    status = status or DOUBT_RESOLVED
    if status not in DOUBT_STATUSES:
        raise ValidationError({'status': f'Status must be one of {", ".join(DOUBT_STATUSES)}'})

    doubt = _get_or_404(Doubt, doubt_id, 'Doubt not found')
    doubt.response = str(response).strip()
    doubt.status = status
    doubt.responded_at = timezone.now()
    doubt.save(update_fields=['response', 'status', 'responded_at', 'updated_at'])
    logger.info(f"Doubt {doubt.id} answered, status {doubt.status}")
    return doubt


def delete_doubt(doubt_id):
    doubt = _get_or_404(Doubt, doubt_id, 'Doubt not found')
    doubt.delete()
    logger.info(f"Doubt {doubt_id} deleted")
