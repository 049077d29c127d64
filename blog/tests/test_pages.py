"""
Tests for the reader-facing pages, robots.txt, the JSON API and sitemap
revalidation.

Run with: python -m pytest blog/tests/test_pages.py -v
"""

import pytest
from django.core.cache import cache

from core.exceptions import SitemapGenerationError
from blog.models import Post
from blog.services.sitemap_service import SitemapService
from blog.tests.conftest import utc


BROWSER_UA = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) AppleWebKit/605.1.15 Safari/605.1.15"
CRAWLER_UA = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"


# =============================================================================
# Post pages and view counting
# =============================================================================

@pytest.mark.django_db
class TestPostDetail:

    def test_browser_visit_counts_a_view(self, client, make_post):
        post = make_post("Counted")

        response = client.get(post.get_absolute_url(), HTTP_USER_AGENT=BROWSER_UA)

        assert response.status_code == 200
        post.refresh_from_db()
        assert post.views == 1

    @pytest.mark.parametrize("user_agent", [CRAWLER_UA, "axios/1.6.0", "node-fetch/2.6"])
    def test_bot_visit_does_not_count(self, client, make_post, user_agent):
        post = make_post("Crawled")

        response = client.get(post.get_absolute_url(), HTTP_USER_AGENT=user_agent)

        assert response.status_code == 200
        post.refresh_from_db()
        assert post.views == 0

    def test_counting_a_view_keeps_last_modified(self, client, make_post):
        post = make_post("Stable", modified=utc(2023, 3, 1))
        client.get(post.get_absolute_url(), HTTP_USER_AGENT=BROWSER_UA)

        post.refresh_from_db()
        assert post.updated_at == utc(2023, 3, 1)

    def test_hidden_post_is_404(self, client, make_post):
        post = make_post("Hidden", hidden=True)

        assert client.get(post.get_absolute_url()).status_code == 404

    def test_draft_post_is_404(self, client, make_post):
        post = make_post("Draft", status=Post.STATUS_DRAFT)

        assert client.get(post.get_absolute_url()).status_code == 404


@pytest.mark.django_db
class TestListingPages:

    def test_home_lists_public_posts(self, client, make_post):
        make_post("Shown")
        make_post("Not shown", hidden=True)

        response = client.get("/")

        assert response.status_code == 200
        titles = [post.title for post in response.context["posts"]]
        assert titles == ["Shown"]

    def test_tag_page(self, client, make_post):
        make_post("Tagged", tags=["react"])
        make_post("Untagged")

        response = client.get("/tags/react/")

        assert [post.title for post in response.context["posts"]] == ["Tagged"]

    def test_search(self, client, make_post):
        make_post("Django signals", excerpt="on_commit hooks")
        make_post("Gardening")

        response = client.get("/search/", {"q": "signals"})

        assert [post.title for post in response.context["posts"]] == ["Django signals"]


# =============================================================================
# robots.txt
# =============================================================================

class TestRobotsTxt:

    def test_body(self, client):
        response = client.get("/robots.txt")

        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/plain")
        assert response.content.decode() == (
            "User-agent: *\n"
            "Allow: /\n"
            "Disallow: /admin\n"
            "\n"
            "Host: https://blog.example.com\n"
            "Sitemap: https://blog.example.com/sitemap.xml\n"
        )

    def test_trailing_slash_on_site_url(self, client, settings):
        settings.SITE_URL = "https://blog.example.com/"

        body = client.get("/robots.txt").content.decode()

        assert "Host: https://blog.example.com\n" in body
        assert "Sitemap: https://blog.example.com/sitemap.xml\n" in body


# =============================================================================
# JSON API
# =============================================================================

@pytest.mark.django_db
class TestPostApi:

    def test_list_filters_by_tag(self, client, make_post):
        make_post("One", tags=["python"])
        make_post("Two", tags=["rust"])

        response = client.get("/api/v1/posts/", {"tag": "python"})

        assert response.status_code == 200
        assert [post["title"] for post in response.json()["results"]] == ["One"]

    def test_tags_report_public_post_counts(self, client, make_post):
        make_post("One", tags=["python"])
        make_post("Two", tags=["python"], hidden=True)

        response = client.get("/api/v1/tags/")

        assert response.status_code == 200
        assert response.json()[0]["post_count"] == 1


# =============================================================================
# Sitemap revalidation
# =============================================================================

@pytest.mark.django_db
class TestRevalidateSitemaps:

    ENDPOINT = "/api/v1/sitemaps/revalidate/"

    def test_anonymous_is_rejected(self, client):
        response = client.post(self.ENDPOINT)

        assert response.status_code == 403
        assert cache.get("sitemap:index") is None

    def test_staff_rebuilds_every_sitemap(self, client, admin_user, make_post):
        make_post("Fresh", tags=["news"])
        client.force_login(admin_user)

        response = client.post(self.ENDPOINT)

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        for key in ("sitemap:index", "sitemap:posts", "sitemap:posts-audio", "sitemap:tags"):
            assert cache.get(key) is not None
        assert "/posts/fresh/" in cache.get("sitemap:posts")["xml"]

    def test_rebuild_replaces_stale_documents(self, client, admin_user, make_post):
        make_post("Before")
        client.get("/sitemaps/posts.xml")
        make_post("After")
        client.force_login(admin_user)

        client.post(self.ENDPOINT)

        assert b"/posts/after/" in client.get("/sitemaps/posts.xml").content

    def test_failure_is_500(self, client, admin_user, monkeypatch):
        def fail(self):
            raise SitemapGenerationError("database unavailable")

        monkeypatch.setattr(SitemapService, "generate_all", fail)
        client.force_login(admin_user)

        response = client.post(self.ENDPOINT)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to regenerate sitemaps"}
