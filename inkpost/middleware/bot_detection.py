"""
Bot Detection Middleware

Tags every request with ``request.is_bot`` so views can skip side effects
(view counters, analytics) for crawler and script traffic. Nothing is
blocked: crawlers must still reach pages, robots.txt and the sitemaps.
"""

import logging

from core.utils import is_likely_bot_user_agent

logger = logging.getLogger(__name__)


class BotDetectionMiddleware:
    """
    Classify the User-Agent header once per request.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        user_agent = request.META.get("HTTP_USER_AGENT")
        request.is_bot = is_likely_bot_user_agent(user_agent)

        if request.is_bot:
            logger.debug("Bot request: %s %s (%s)", request.method, request.path, user_agent[:120])

        return self.get_response(request)
