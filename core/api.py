import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from core.exceptions import ConsoleError

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    """
    Renders ConsoleError subclasses as {"error": ..., "code": ...};
    everything else goes through DRF's default handler.
    """
    if isinstance(exc, ConsoleError):
        view = context.get("view")
        logger.info(
            "%s refused: %s",
            view.__class__.__name__ if view else "request",
            exc.message,
        )
        return Response(
            {"error": exc.message, "code": exc.code},
            status=exc.status_code,
        )

    return drf_exception_handler(exc, context)
