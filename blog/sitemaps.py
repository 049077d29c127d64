"""
Blog Sitemaps - entry providers for the XML sitemaps

Each class describes one ``<urlset>``: which items it lists and how their
``loc``/``lastmod``/``changefreq``/``priority`` are derived. Rendering and
storage live in ``blog.services``.
"""

from datetime import timedelta

from django.contrib.sitemaps import Sitemap
from django.utils import timezone

from .repositories import PostRepository, TagRepository
from .services.sitemap_types import ChangeFrequency

# Posts touched within this window are re-crawled weekly, older ones monthly
RECENT_POST_WINDOW = timedelta(days=60)


class BlogSitemap(Sitemap):
    """Base for the blog sitemaps; pins the clock used for changefreq."""

    # Namespaces the urlset template must declare
    include_images = False
    include_video = False

    def __init__(self, now=None):
        self.now = now or timezone.now()


class PostSitemap(BlogSitemap):
    """Sitemap for public posts, with thumbnails."""
    priority = 0.8
    include_images = True

    def items(self):
        return PostRepository.get_for_sitemap()

    def lastmod(self, obj):
        return obj.last_modified

    def changefreq(self, obj):
        if self.now - obj.last_modified < RECENT_POST_WINDOW:
            return ChangeFrequency.WEEKLY.value
        return ChangeFrequency.MONTHLY.value


class PostAudioSitemap(PostSitemap):
    """Sitemap for posts with narration, exposed through the video namespace."""
    include_video = True

    def items(self):
        return PostRepository.get_with_audio_for_sitemap()

    def changefreq(self, obj):
        return ChangeFrequency.WEEKLY.value


class TagSitemap(BlogSitemap):
    """Sitemap for tag pages; lastmod is the tag's most recent post."""
    changefreq = ChangeFrequency.MONTHLY.value
    priority = 0.7

    def items(self):
        return TagRepository.get_for_sitemap()

    def lastmod(self, obj):
        return obj.last_post_modified
