"""
API error envelope - every failed API call answers with {"error": "..."}
"""
import logging

from django.http import JsonResponse
from django.views.defaults import page_not_found
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(data):
    """Pull the first human readable message out of DRF error data"""
    if isinstance(data, dict):
        for key, value in data.items():
            message = _first_message(value)
            if key in ('detail', 'non_field_errors'):
                return message
            return f"{key}: {message}"
        return 'Invalid request'
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else 'Invalid request'
    return str(data)


def api_exception_handler(exc, context):
    """
    Wrap DRF's handler so that:
    - known API errors (401/403/400/404) keep their status with an "error" key
    - serializer field errors are kept under "fields"
    - anything unexpected is logged and collapsed to a generic 500
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        view_name = view.__class__.__name__ if view is not None else 'unknown view'
        logger.error(f"Unhandled error in {view_name}: {exc}", exc_info=exc)
        return Response({'error': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    data = response.data
    payload = {'error': _first_message(data)}
    if isinstance(data, dict) and 'detail' not in data:
        payload['fields'] = data
    response.data = payload
    return response


def api_not_found(request, exception=None):
    """404 handler: API paths answer with the JSON envelope, pages keep Django's page"""
    if request.path.startswith('/api/'):
        return JsonResponse({'error': 'Not found'}, status=status.HTTP_404_NOT_FOUND)
    return page_not_found(request, exception)
