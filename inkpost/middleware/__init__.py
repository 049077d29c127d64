# Request middleware package

from .bot_detection import BotDetectionMiddleware
from .request_logging import RequestLoggingMiddleware

__all__ = [
    "BotDetectionMiddleware",
    "RequestLoggingMiddleware",
]
