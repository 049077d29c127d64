"""
Sitemap Generator

Builds sitemap XML for a given kind from the current post and tag data.
Generation is a pure function of the content snapshot and the clock, so two
runs over unchanged data produce byte-identical documents.
"""

from types import SimpleNamespace
from typing import Dict, Optional
from urllib.parse import urlparse

from django.conf import settings
from django.db import DatabaseError
from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import render_to_string

from core.exceptions import SitemapGenerationError
from core.services import BaseService
from blog.sitemaps import PostSitemap, PostAudioSitemap, TagSitemap
from .sitemap_types import SitemapDocument, SitemapKind


class SitemapGenerator(BaseService):
    """
    Render sitemap documents.

    The index always references the three sub-sitemaps; the others list
    entries from the matching ``blog.sitemaps`` class.
    """

    INDEX_TEMPLATE = "sitemaps/index.xml"
    URLSET_TEMPLATE = "sitemaps/urlset.xml"

    SITEMAP_CLASSES = {
        SitemapKind.POSTS: PostSitemap,
        SitemapKind.POSTS_AUDIO: PostAudioSitemap,
        SitemapKind.TAGS: TagSitemap,
    }

    def __init__(self, base_url: Optional[str] = None, clock=None):
        super().__init__(clock=clock)
        self.base_url = (base_url or settings.SITE_URL).rstrip("/")

    @property
    def site(self):
        """Site-like object carrying ``domain`` for Django's Sitemap.get_urls()."""
        return SimpleNamespace(domain=urlparse(self.base_url).netloc)

    @property
    def protocol(self) -> str:
        return urlparse(self.base_url).scheme or "https"

    def generate(self, kind) -> SitemapDocument:
        """
        Build one document.

        Raises:
            SitemapGenerationError: the content source or templates failed.
        """
        kind = SitemapKind.parse(kind)
        now = self.now()

        try:
            if kind is SitemapKind.INDEX:
                xml = self.render_index()
            else:
                xml = self.render_urlset(self.SITEMAP_CLASSES[kind](now=now))
        except (DatabaseError, TemplateDoesNotExist, TemplateSyntaxError) as exc:
            raise SitemapGenerationError(
                f"Could not build {kind} sitemap: {exc}", kind=kind
            ) from exc

        self.logger.info("Generated %s sitemap (%d bytes)", kind, len(xml))
        return SitemapDocument(kind=kind, xml=xml, generated_at=now)

    def generate_all(self) -> Dict[SitemapKind, SitemapDocument]:
        """Build every document against the same clock reading."""
        now = self.now()
        frozen = SitemapGenerator(base_url=self.base_url, clock=lambda: now)
        return {kind: frozen.generate(kind) for kind in SitemapKind}

    def render_index(self) -> str:
        locations = [
            f"{self.base_url}{kind.url_path}"
            for kind in (SitemapKind.POSTS, SitemapKind.POSTS_AUDIO, SitemapKind.TAGS)
        ]
        return render_to_string(self.INDEX_TEMPLATE, {"sitemaps": locations})

    def render_urlset(self, sitemap) -> str:
        urls = sitemap.get_urls(site=self.site, protocol=self.protocol)

        if not urls:
            self.logger.warning(
                "%s produced no entries; writing an empty urlset", type(sitemap).__name__
            )

        # Only the first page is rendered; the index does not reference further pages
        paginator = sitemap.paginator
        if paginator.num_pages > 1:
            self.logger.warning(
                "%s has %d entries but only the first %d are listed",
                type(sitemap).__name__, paginator.count, paginator.per_page,
            )

        return render_to_string(self.URLSET_TEMPLATE, {
            "urlset": urls,
            "include_images": sitemap.include_images,
            "include_video": sitemap.include_video,
        })
