"""
Celery tasks for keeping sitemaps in step with content.

Queued from the admin "Rebuild sitemaps" action.
"""

import logging
from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    name="blog.regenerate_sitemaps",
)
def regenerate_sitemaps_task(self):
    """Rebuild and store every sitemap from the current content."""
    from core.exceptions import InkpostError
    from blog.services.sitemap_service import get_sitemap_service

    try:
        documents = get_sitemap_service().generate_all()
    except InkpostError as exc:
        logger.error(f"Sitemap regeneration failed: {exc.message}")
        if self.request.retries >= self.max_retries:
            logger.error(f"Sitemap regeneration failed after {self.request.retries} retries")
            return {"status": "failed", "error": exc.message}
        raise self.retry(exc=exc)

    return {
        "status": "success",
        "kinds": sorted(kind.value for kind in documents),
    }
