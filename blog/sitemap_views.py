"""
Sitemap and robots.txt views

Each sitemap route serves one fixed kind; the XML comes from the sitemap
service (stored copy or fresh regeneration).
"""

from django.conf import settings
from django.http import HttpResponse
from django.views.decorators.http import require_GET

from .services.sitemap_service import read_or_generate_sitemap
from .services.sitemap_types import SitemapKind

XML_CONTENT_TYPE = "application/xml; charset=utf-8"

FAILURE_MESSAGES = {
    SitemapKind.INDEX: "Failed to generate sitemap index",
    SitemapKind.POSTS: "Failed to generate posts sitemap",
    SitemapKind.POSTS_AUDIO: "Failed to generate posts audio sitemap",
    SitemapKind.TAGS: "Failed to generate tags sitemap",
}


def sitemap_response(kind: SitemapKind) -> HttpResponse:
    xml = read_or_generate_sitemap(kind)
    if xml is None:
        return HttpResponse(
            FAILURE_MESSAGES[kind],
            status=500,
            content_type="text/plain; charset=utf-8",
        )
    return HttpResponse(xml, content_type=XML_CONTENT_TYPE)


@require_GET
def sitemap_index(request):
    return sitemap_response(SitemapKind.INDEX)


@require_GET
def posts_sitemap(request):
    """All public posts with thumbnails."""
    return sitemap_response(SitemapKind.POSTS)


@require_GET
def posts_audio_sitemap(request):
    """Only posts with narration, carrying the audio through the video namespace."""
    return sitemap_response(SitemapKind.POSTS_AUDIO)


@require_GET
def tags_sitemap(request):
    """Tag pages, dated by each tag's most recent post."""
    return sitemap_response(SitemapKind.TAGS)


@require_GET
def robots_txt(request):
    base_url = settings.SITE_URL.rstrip("/")
    lines = [
        "User-agent: *",
        "Allow: /",
        "Disallow: /admin",
        "",
        f"Host: {base_url}",
        f"Sitemap: {base_url}{SitemapKind.INDEX.url_path}",
    ]
    return HttpResponse("\n".join(lines) + "\n", content_type="text/plain; charset=utf-8")
