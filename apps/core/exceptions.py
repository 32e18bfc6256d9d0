from __future__ import annotations

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    DRF exception handler producing the API's error envelope.

    - store failures (any DatabaseError) -> 500 {"error": <raw message>}
    - validation failures -> 400 {"error": "Invalid request data", "details": {...}}
    - everything DRF knows about (404, 405, ...) -> {"error": <detail>}
    """
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception("Store failure in %s", view.__class__.__name__ if view else "unknown view")
        set_rollback()
        return Response({"error": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = {"error": "Invalid request data", "details": response.data}
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"error": str(response.data["detail"])}
    return response
