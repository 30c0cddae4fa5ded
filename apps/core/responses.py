"""Response envelope helpers used by every view."""

from rest_framework import status
from rest_framework.response import Response


def success_response(data=None, *, message=None, status_code=status.HTTP_200_OK):
    """Wrap a payload as ``{"success": true, "message": ..., **data}``."""
    body = {'success': True}
    if message:
        body['message'] = message
    if data:
        body.update(data)
    return Response(body, status=status_code)


def failure_body(message, code, errors=None):
    """Build the ``success: false`` body shared by all error responses."""
    body = {'success': False, 'message': message, 'code': code}
    if errors:
        body['errors'] = errors
    return body
