"""
Content-change hooks: drop stored sitemaps once the write is committed.

The next request for each sitemap regenerates it from the new content.
"""

import logging

from django.db import transaction
from django.db.models.signals import m2m_changed, post_delete, post_save
from django.dispatch import receiver

from core.exceptions import InkpostError
from .models import Post, Tag

logger = logging.getLogger(__name__)


def schedule_sitemap_invalidation():
    from .services.sitemap_service import get_sitemap_service

    def invalidate():
        try:
            get_sitemap_service().invalidate()
        except InkpostError as exc:
            # Store unreachable: stored sitemaps stay as they are until the next change
            logger.error(f"Could not invalidate sitemaps: {exc.message}")

    transaction.on_commit(invalidate)


@receiver(post_save, sender=Post)
@receiver(post_delete, sender=Post)
@receiver(post_save, sender=Tag)
@receiver(post_delete, sender=Tag)
def content_changed(sender, instance, **kwargs):
    schedule_sitemap_invalidation()


@receiver(m2m_changed, sender=Post.tags.through)
def post_tags_changed(sender, instance, action, **kwargs):
    if action in ("post_add", "post_remove", "post_clear"):
        schedule_sitemap_invalidation()
