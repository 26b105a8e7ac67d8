"""
Student API views - every endpoint acts on the signed-in user's own data
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from admin.permissions import IsAuthenticatedProfile
from admin.session import require_auth
from student.serializers import (
    QuestionAttemptSerializer, AttemptSubmitSerializer, VideoProgressSerializer,
    MarkWatchedSerializer, DoubtSerializer, ProfileSerializer,
)
from student.services import interactions
from student.services.stats import get_student_stats

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticatedProfile])
def attempts(request):
    """
    GET  /api/student/attempts/?question_id=<uuid> - own attempts
    POST /api/student/attempts/ - submit an answer

    Request body:
    {
        "question_id": "uuid",
        "selected_answer": 2,
        "time_taken": 35        # optional, seconds
    }

    Response:
    {
        "attempt": {...},
        "is_correct": false,
        "correct_answer": 1,
        "explanation": "..."
    }
    """
    user = require_auth(request)['user']

    if request.method == 'GET':
        rows = interactions.list_attempts(user, request.query_params.get('question_id'))
        return Response(QuestionAttemptSerializer(rows, many=True).data)

    payload = AttemptSubmitSerializer(data=request.data)
    payload.is_valid(raise_exception=True)
    result = interactions.submit_attempt(
        user,
        payload.validated_data['question_id'],
        payload.validated_data['selected_answer'],
        payload.validated_data.get('time_taken'),
    )
    return Response({
        'attempt': QuestionAttemptSerializer(result['attempt']).data,
        'is_correct': result['is_correct'],
        'correct_answer': result['correct_answer'],
        'explanation': result['explanation'],
    }, status=status.HTTP_201_CREATED)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticatedProfile])
def video_progress(request):
    """
    GET  /api/student/video-progress/?video_id=<uuid> - own progress (one row or null with video_id)
    POST /api/student/video-progress/ {"video_id": "uuid"} - mark watched
    """
    user = require_auth(request)['user']

    if request.method == 'GET':
        video_id = request.query_params.get('video_id')
        if video_id:
            progress = interactions.get_progress(user, video_id)
            return Response(VideoProgressSerializer(progress).data if progress else None)
        return Response(VideoProgressSerializer(interactions.list_progress(user), many=True).data)

    payload = MarkWatchedSerializer(data=request.data)
    payload.is_valid(raise_exception=True)
    progress, created = interactions.mark_video_watched(user, payload.validated_data['video_id'])
    return Response(
        VideoProgressSerializer(progress).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
    )


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticatedProfile])
def doubts(request):
    """
    GET  /api/student/doubts/ - own doubts, newest first
    POST /api/student/doubts/ {"title", "description", "question_id"?, "video_id"?}
    """
    user = require_auth(request)['user']

    if request.method == 'GET':
        return Response(DoubtSerializer(interactions.list_user_doubts(user), many=True).data)

    payload = DoubtSerializer(data=request.data)
    payload.is_valid(raise_exception=True)
    doubt = interactions.submit_doubt(
        user,
        payload.validated_data['title'],
        payload.validated_data['description'],
        question_id=payload.validated_data.get('question_id'),
        video_id=payload.validated_data.get('video_id'),
    )
    return Response(DoubtSerializer(doubt).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticatedProfile])
def stats(request):
    """GET /api/student/stats/ - progress figures for the dashboard"""
    user = require_auth(request)['user']
    try:
        return Response(get_student_stats(user))
    except Exception as exc:
        logger.error(f"Error fetching stats for {user.id}: {exc}", exc_info=True)
        return Response({'error': 'Failed to fetch stats'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET', 'PUT', 'PATCH'])
@permission_classes([IsAuthenticatedProfile])
def profile(request):
    """
    GET /api/student/profile/ - current user's profile
    PUT /api/student/profile/ {"name"?, "preferred_class_level"?, "preferred_batch"?}
    """
    user = require_auth(request)['user']

    if request.method == 'GET':
        return Response(ProfileSerializer(user).data)

    serializer = ProfileSerializer(user, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    serializer.save()
    return Response(serializer.data)
