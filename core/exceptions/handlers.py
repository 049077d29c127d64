"""
DRF Exception Handler
=====================

Renders ``InkpostError`` subtypes as ``{error, message, detail}`` JSON with
the exception's own status code. Registered in
``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.

Client errors (4xx) are logged at WARNING, upstream and server failures
at ERROR so they show up next to the sitemap and shortener logs.
"""

import logging
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

from .base import InkpostError

logger = logging.getLogger(__name__)


def _view_name(context) -> str:
    view = context.get("view")
    return type(view).__name__ if view is not None else "unknown view"


def inkpost_exception_handler(exc, context):
    """
    Custom DRF exception handler.

    Anything that is neither an ``InkpostError`` nor a DRF exception is left
    to Django (returns None), after being logged with its traceback.
    """
    if isinstance(exc, InkpostError):
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(
            level,
            "%s in %s: %s %s",
            exc.error_code,
            _view_name(context),
            exc.message,
            exc.details or "",
        )
        return Response(exc.to_dict(), status=exc.status_code)

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled exception in %s", _view_name(context))
    return response
