"""
Shared fixtures for blog tests.
"""

from datetime import datetime, timezone as dt_timezone

import pytest
from django.core.cache import cache

from blog.models import Post, Tag


@pytest.fixture(autouse=True)
def clear_cache():
    """Sitemaps are stored in the locmem cache under test settings."""
    cache.clear()
    yield
    cache.clear()


def utc(*args):
    return datetime(*args, tzinfo=dt_timezone.utc)


@pytest.fixture
def make_post(db):
    """
    Create a post. ``modified`` pins ``updated_at``, which ``auto_now``
    would otherwise overwrite on save.
    """
    def _make(title, tags=(), modified=None, **fields):
        fields.setdefault("content", f"Body of {title}")
        fields.setdefault("status", Post.STATUS_PUBLISHED)
        post = Post.objects.create(title=title, **fields)
        for name in tags:
            tag, _ = Tag.objects.get_or_create(name=name)
            post.tags.add(tag)
        if modified is not None:
            Post.objects.filter(pk=post.pk).update(updated_at=modified)
            post.refresh_from_db()
        return post

    return _make
