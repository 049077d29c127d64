"""
Inkpost Exception Hierarchy
===========================

Domain-specific exceptions for structured error handling across the blog.

Usage::

    from core.exceptions import ValidationError, ShortenerError

    # In a view:
    raise ValidationError("URL is required", field="url")

    # In a service:
    raise SitemapGenerationError("Post query failed", kind="posts")
"""

from rest_framework import status


# =============================================================================
# Base Exception
# =============================================================================

class InkpostError(Exception):
    """Base exception for all Inkpost application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"

    def __init__(self, message="An unexpected error occurred", **kwargs):
        self.message = message
        self.details = kwargs
        super().__init__(message)

    def to_dict(self):
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["detail"] = self.details
        return result


# =============================================================================
# Service Errors (external dependencies)
# =============================================================================

class ServiceError(InkpostError):
    """External service or API call failed."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "service_error"

    def __init__(self, message="External service unavailable", service=None, **kwargs):
        if service:
            kwargs["service"] = service
        super().__init__(message, **kwargs)


class ShortenerError(ServiceError):
    """The URL-shortening upstream failed or answered with garbage."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "shortener_error"

    def __init__(self, message="Failed to shorten URL", **kwargs):
        super().__init__(message, service="is.gd", **kwargs)


# =============================================================================
# Sitemap Errors
# =============================================================================

class SitemapGenerationError(InkpostError):
    """A sitemap document could not be built from the content source."""

    error_code = "sitemap_generation_error"

    def __init__(self, message="Failed to generate sitemap", kind=None, **kwargs):
        if kind:
            kwargs["kind"] = str(kind)
        super().__init__(message, **kwargs)


class SitemapStoreError(InkpostError):
    """Reading or writing the sitemap store failed."""

    error_code = "sitemap_store_error"

    def __init__(self, message="Sitemap store unavailable", kind=None, **kwargs):
        if kind:
            kwargs["kind"] = str(kind)
        super().__init__(message, **kwargs)


# =============================================================================
# Client Errors
# =============================================================================

class ValidationError(InkpostError):
    """Invalid input from the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"

    def __init__(self, message="Invalid request data", field=None, **kwargs):
        if field:
            kwargs["field"] = field
        super().__init__(message, **kwargs)
