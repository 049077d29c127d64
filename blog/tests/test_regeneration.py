"""
Tests for keeping stored sitemaps in step with content: invalidation on
commit and the admin-queued rebuild task.

Run with: python -m pytest blog/tests/test_regeneration.py -v
"""

import pytest
from django.core.cache import cache

from core.exceptions import SitemapGenerationError
from blog.services.sitemap_service import SitemapService
from blog.tasks import regenerate_sitemaps_task


SITEMAP_KEYS = ("sitemap:index", "sitemap:posts", "sitemap:posts-audio", "sitemap:tags")


@pytest.mark.django_db
class TestInvalidationOnCommit:

    def test_new_post_drops_stored_sitemaps(self, client, make_post, django_capture_on_commit_callbacks):
        make_post("Before")
        client.get("/sitemaps/posts.xml")
        assert cache.get("sitemap:posts") is not None

        with django_capture_on_commit_callbacks(execute=True):
            make_post("After")

        assert cache.get("sitemap:posts") is None
        assert b"/posts/after/" in client.get("/sitemaps/posts.xml").content

    def test_tag_change_drops_stored_sitemaps(self, client, make_post, django_capture_on_commit_callbacks):
        post = make_post("Tagged", tags=["old"])
        client.get("/sitemaps/tags.xml")

        with django_capture_on_commit_callbacks(execute=True):
            post.tags.clear()

        assert cache.get("sitemap:tags") is None
        assert b"/tags/old/" not in client.get("/sitemaps/tags.xml").content

    def test_nothing_happens_before_commit(self, client, make_post, django_capture_on_commit_callbacks):
        make_post("Before")
        client.get("/sitemaps/posts.xml")

        with django_capture_on_commit_callbacks(execute=False) as callbacks:
            make_post("Pending")

        assert callbacks
        assert cache.get("sitemap:posts") is not None


@pytest.mark.django_db
class TestRegenerateSitemapsTask:

    def test_rebuilds_every_kind(self, make_post):
        make_post("Queued", audio_url="https://cdn.example.com/queued.mp3")

        result = regenerate_sitemaps_task.apply().get()

        assert result == {
            "status": "success",
            "kinds": ["index", "posts", "posts-audio", "tags"],
        }
        for key in SITEMAP_KEYS:
            assert cache.get(key) is not None

    def test_gives_up_after_retries(self, monkeypatch):
        def fail(self):
            raise SitemapGenerationError("database unavailable")

        monkeypatch.setattr(SitemapService, "generate_all", fail)
        monkeypatch.setattr(regenerate_sitemaps_task, "max_retries", 0)

        result = regenerate_sitemaps_task.apply().get()

        assert result == {"status": "failed", "error": "database unavailable"}
