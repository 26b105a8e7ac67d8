"""
Admin API views - analytics, student listing and the doubt inbox
"""
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from .permissions import IsAdminProfile
from .services.analytics import get_platform_analytics
from student.serializers import AdminDoubtSerializer, DoubtResponseSerializer
from student.services import interactions
from student.services.stats import students_with_stats

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([IsAdminProfile])
def analytics(request):
    """GET /api/admin/analytics/ - platform-wide figures"""
    try:
        return Response(get_platform_analytics())
    except Exception as exc:
        logger.error(f"Error computing analytics: {exc}", exc_info=True)
        return Response({'error': 'Failed to fetch analytics'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
@permission_classes([IsAdminProfile])
def students(request):
    """GET /api/admin/students/ - every student with attempt and watch figures"""
    return Response(students_with_stats())


@api_view(['GET'])
@permission_classes([IsAdminProfile])
def doubts(request):
    """GET /api/admin/doubts/ - all doubts, newest first, with author name and email"""
    return Response(AdminDoubtSerializer(interactions.list_all_doubts(), many=True).data)


@api_view(['PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAdminProfile])
def doubt_detail(request, doubt_id):
    """
    PUT    /api/admin/doubts/<id>/ {"response": "...", "status": "RESOLVED"?}
    DELETE /api/admin/doubts/<id>/
    """
    if request.method == 'DELETE':
        interactions.delete_doubt(doubt_id)
        return Response({'message': 'Doubt deleted successfully'})

    payload = DoubtResponseSerializer(data=request.data)
    payload.is_valid(raise_exception=True)
    doubt = interactions.respond_to_doubt(
        doubt_id,
        payload.validated_data.get('response'),
        payload.validated_data.get('status'),
    )
    return Response(AdminDoubtSerializer(doubt).data)
