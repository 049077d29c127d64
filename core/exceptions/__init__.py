"""
core.exceptions: re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, ShortenerError
    from core.exceptions import inkpost_exception_handler
"""

from .base import (
    InkpostError,
    ServiceError,
    ShortenerError,
    SitemapGenerationError,
    SitemapStoreError,
    ValidationError,
)

from .handlers import inkpost_exception_handler

__all__ = [
    # Base
    "InkpostError",
    # Service
    "ServiceError",
    "ShortenerError",
    # Sitemaps
    "SitemapGenerationError",
    "SitemapStoreError",
    # Client
    "ValidationError",
    # Handler
    "inkpost_exception_handler",
]
