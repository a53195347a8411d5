import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Shape every API error into the portfolio envelope.

    Validation failures become 422 ``{"errors": {...}}``; everything DRF knows
    about becomes ``{"error": ..., "status_code": ...}``; anything else is
    logged and reported as a 500.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "view")
        return Response(
            {"error": "Internal server error", "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        errors = response.data
        if not isinstance(errors, dict):
            errors = {"non_field_errors": errors}
        response.status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        response.data = {"errors": errors}
        return response

    if isinstance(response.data, dict) and "detail" in response.data:
        detail = response.data["detail"]
    else:
        detail = response.data
    response.data = {"error": str(detail), "status_code": response.status_code}
    return response
