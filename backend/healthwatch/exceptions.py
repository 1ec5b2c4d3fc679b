import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    DRF handles its own exceptions (400/401/403/404...).
    Anything else is logged with its traceback and answered with a generic 500.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(
        "Unhandled error in %s",
        view.__class__.__name__ if view is not None else "unknown view",
        exc_info=exc,
    )
    return Response(
        {"detail": "An unexpected error occurred."},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
