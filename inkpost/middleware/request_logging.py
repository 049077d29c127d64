"""
Request Logging Middleware
"""

import logging

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """
    Log API and sitemap requests, and every error response.
    """

    LOGGED_PREFIXES = ("/api/", "/sitemap")

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.path.startswith(self.LOGGED_PREFIXES):
            logger.info(
                "Request: %s %s from %s%s",
                request.method,
                request.path,
                self.get_client_ip(request),
                " (bot)" if getattr(request, "is_bot", False) else "",
            )

        response = self.get_response(request)

        if response.status_code >= 400:
            logger.warning("Error %s: %s %s", response.status_code, request.method, request.path)

        return response

    def get_client_ip(self, request):
        x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
        if x_forwarded_for:
            return x_forwarded_for.split(",")[0].strip()
        return request.META.get("REMOTE_ADDR", "unknown")
