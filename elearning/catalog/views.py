"""
Catalog views - taxonomy, admin content management and public content reads
"""
import logging

from django.http import Http404
from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from admin.permissions import IsAdminProfile
from admin.session import get_current_user, require_admin
from catalog.models import Video, Question
from catalog.serializers import VideoSerializer, VideoSummarySerializer, QuestionSerializer
from catalog.services import categories
from catalog.services.content import filter_content, recommended_videos, parse_limit, DEFAULT_RECOMMENDED_LIMIT
from catalog.services.latex import render_latex

logger = logging.getLogger(__name__)


# ============ Categories ============

@api_view(['GET'])
@permission_classes([AllowAny])
def public_categories(request):
    """GET /api/categories/ - the full taxonomy, public"""
    return Response(categories.get_categories())


@api_view(['GET', 'PUT'])
def admin_categories(request):
    """
    GET /api/admin/categories/ - the full taxonomy
    PUT /api/admin/categories/ - replace one level

    Request body:
    {
        "type": "classes" | "subjects" | "chapters",
        "values": ["..."],
        "subject": "PHYSICS"      # only for chapters
    }
    """
    session = require_admin(request)

    if request.method == 'GET':
        return Response(categories.get_categories())

    categories.update_category(
        request.data.get('type'),
        request.data.get('values'),
        subject=request.data.get('subject'),
        actor=session['user'],
    )
    return Response({'success': True})


@api_view(['POST'])
def latex_preview(request):
    """POST /api/admin/latex-preview/ - render {"content": "..."} to HTML"""
    require_admin(request)
    content = request.data.get('content') or ''
    return Response({'html': render_latex(content)})


# ============ Admin content management ============

class AdminContentViewSet(viewsets.ModelViewSet):
    """
    Shared behaviour of the admin video/question endpoints: admin only,
    filterable list, PUT behaves as a partial update, JSON 404s.
    """
    permission_classes = [IsAdminProfile]
    filter_fields = ('class_level', 'subject', 'chapter')
    not_found_message = 'Not found'
    deleted_message = 'Deleted successfully'

    def get_queryset(self):
        queryset = self.queryset.model.objects.order_by('-created_at')
        if self.action == 'list':
            queryset = filter_content(queryset, self.request.query_params, allowed=self.filter_fields)
        return queryset

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(self.not_found_message)

    def perform_create(self, serializer):
        instance = serializer.save(created_by=get_current_user(self.request))
        logger.info(f"Created {instance.__class__.__name__} {instance.id}")

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return super().update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        instance_id = instance.id
        instance.delete()
        logger.info(f"Deleted {self.queryset.model.__name__} {instance_id}")
        return Response({'message': self.deleted_message}, status=status.HTTP_200_OK)


class VideoViewSet(AdminContentViewSet):
    """
    /api/admin/videos/ - create from a YouTube URL, edit taxonomy tags and
    description, delete (watch progress rows go with it)
    """
    queryset = Video.objects.all()
    serializer_class = VideoSerializer
    not_found_message = 'Video not found'
    deleted_message = 'Video deleted successfully'


class QuestionViewSet(AdminContentViewSet):
    """/api/admin/questions/ - question bank CRUD"""
    queryset = Question.objects.all()
    serializer_class = QuestionSerializer
    filter_fields = ('class_level', 'subject', 'chapter', 'difficulty')
    not_found_message = 'Question not found'
    deleted_message = 'Question deleted successfully'


# ============ Public content reads ============

@api_view(['GET'])
@permission_classes([AllowAny])
def student_videos(request):
    """GET /api/student/videos/?class_level=&subject=&chapter=&limit="""
    videos = filter_content(
        Video.objects.order_by('-created_at'),
        request.query_params,
        allowed=('class_level', 'subject', 'chapter'),
    )
    return Response(VideoSerializer(videos, many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def student_questions(request):
    """GET /api/student/questions/?class_level=&subject=&chapter=&difficulty=&limit="""
    questions = filter_content(Question.objects.order_by('-created_at'), request.query_params)
    return Response(QuestionSerializer(questions, many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def recommended(request):
    """
    GET /api/videos/recommended/?limit=6
    Personalised by the signed-in user's preferences, latest videos otherwise
    """
    limit = parse_limit(request.query_params.get('limit'), DEFAULT_RECOMMENDED_LIMIT)
    videos = recommended_videos(get_current_user(request), limit=limit)
    return Response(VideoSummarySerializer(videos, many=True).data)
