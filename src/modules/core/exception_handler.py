"""DRF exception handler for errors that escape a view.

Views translate the domain errors they expect.  Whatever is left is
mapped here by category, so a client always receives
``{"detail": ...}`` and never a bare server fault.  Storage faults are
logged and answered with a generic message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import (
    Conflict,
    InternalFailure,
    InvalidRequest,
    NotFound,
    NotificationFailure,
    PreconditionFailed,
)

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error."

STATUS_BY_CATEGORY = (
    (InvalidRequest, status.HTTP_400_BAD_REQUEST),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (Conflict, status.HTTP_409_CONFLICT),
    (PreconditionFailed, status.HTTP_400_BAD_REQUEST),
    (NotificationFailure, status.HTTP_502_BAD_GATEWAY),
)


def domain_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is not None:
        return response

    for category, status_code in STATUS_BY_CATEGORY:
        if isinstance(exc, category):
            return Response({"detail": str(exc)}, status=status_code)

    if isinstance(exc, (InternalFailure, DatabaseError)):
        view = context.get("view")
        logger.error(
            "api.internal_failure",
            view=type(view).__name__ if view else None,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return Response(
            {"detail": INTERNAL_ERROR_DETAIL},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return None
