"""
Sitemap Service
===============

Serves sitemap XML from the store, regenerating on a miss or when the
stored document is stale.

Usage::

    from blog.services.sitemap_service import read_or_generate_sitemap

    xml = read_or_generate_sitemap("tags")
    if xml is None:
        ...  # generation failed; nothing was written

Concurrent misses for the same kind may both regenerate; the last write
wins. Documents only depend on the content snapshot, so that is harmless.
"""

from typing import Dict, Iterable, Optional

from django.conf import settings
from django.core.cache import caches

from core.exceptions import InkpostError, SitemapGenerationError
from core.services import BaseService
from .sitemap_generator import SitemapGenerator
from .sitemap_store import (
    CacheSitemapStore,
    FileSitemapStore,
    SitemapStore,
    freshness_from_max_age,
)
from .sitemap_types import SitemapDocument, SitemapKind


class SitemapService(BaseService):
    """
    Coordinates the store and the generator.

    Args:
        store: where documents are kept between requests.
        generator: builds a document for a kind.
        freshness: ``(document, now) -> bool``; stale documents are rebuilt.
        serve_stale_on_error: when regeneration fails, fall back to the
            stale stored document instead of reporting failure.
        clock: returns the current aware datetime.
    """

    def __init__(
        self,
        store: SitemapStore,
        generator: SitemapGenerator,
        freshness=None,
        serve_stale_on_error: bool = False,
        clock=None,
    ):
        super().__init__(clock=clock)
        self.store = store
        self.generator = generator
        self.freshness = freshness or freshness_from_max_age(0)
        self.serve_stale_on_error = serve_stale_on_error

    def read_or_generate(self, kind) -> Optional[str]:
        """
        Return the XML for ``kind``, or None if it could not be produced.

        Unknown kinds raise ValueError; every generation or store failure is
        logged and reported as None.
        """
        kind = SitemapKind.parse(kind)

        stored = self._read_stored(kind)
        if stored is not None and self.freshness(stored, self.now()):
            self.logger.debug("Serving stored %s sitemap", kind)
            return stored.xml

        try:
            document = self.generator.generate(kind)
            self.store.put(document)
        except InkpostError as exc:
            self.logger.error("Failed to generate %s sitemap: %s", kind, exc.message)
            return self._fallback(kind, stored)
        except Exception:
            self.logger.exception("Unexpected error generating %s sitemap", kind)
            return self._fallback(kind, stored)

        self.logger.info(
            "%s %s sitemap", "Regenerated stale" if stored else "Generated missing", kind
        )
        return document.xml

    def generate_all(self) -> Dict[SitemapKind, SitemapDocument]:
        """
        Rebuild and store every document from one content snapshot.

        Nothing is written unless all four documents were built.

        Raises:
            SitemapGenerationError: a document could not be built.
            SitemapStoreError: a built document could not be stored.
        """
        try:
            documents = self.generator.generate_all()
        except InkpostError:
            raise
        except Exception as exc:
            raise SitemapGenerationError(f"Failed to regenerate sitemaps: {exc}") from exc

        for document in documents.values():
            self.store.put(document)

        self.logger.info("Regenerated all sitemaps")
        return documents

    def trigger_regeneration(self) -> bool:
        """Like ``generate_all`` but never raises; returns success."""
        try:
            self.generate_all()
        except InkpostError as exc:
            self.logger.error("Failed to regenerate sitemaps: %s", exc.message)
            return False
        return True

    def invalidate(self, kinds: Optional[Iterable] = None) -> None:
        """Drop stored documents so the next read regenerates them."""
        for kind in kinds or SitemapKind:
            self.store.delete(SitemapKind.parse(kind))

    def _read_stored(self, kind: SitemapKind) -> Optional[SitemapDocument]:
        try:
            return self.store.get(kind)
        except InkpostError as exc:
            # An unreadable store behaves like an empty one
            self.logger.warning("Could not read stored %s sitemap: %s", kind, exc.message)
            return None

    def _fallback(self, kind: SitemapKind, stored: Optional[SitemapDocument]) -> Optional[str]:
        if stored is not None and self.serve_stale_on_error:
            self.logger.warning("Serving stale %s sitemap after failed regeneration", kind)
            return stored.xml
        return None


# =============================================================================
# Default wiring from settings
# =============================================================================

def build_store() -> SitemapStore:
    """Store selected by ``SITEMAP_STORE``."""
    if settings.SITEMAP_STORE == "cache":
        return CacheSitemapStore(
            caches["default"],
            timeout=getattr(settings, "SITEMAP_CACHE_TIMEOUT", None),
        )
    return FileSitemapStore(settings.SITEMAP_ROOT)


def get_sitemap_service() -> SitemapService:
    """Service wired from the current settings."""
    return SitemapService(
        store=build_store(),
        generator=SitemapGenerator(base_url=settings.SITE_URL),
        freshness=freshness_from_max_age(settings.SITEMAP_MAX_AGE),
        serve_stale_on_error=getattr(settings, "SITEMAP_SERVE_STALE_ON_ERROR", False),
    )


def read_or_generate_sitemap(kind) -> Optional[str]:
    """Module-level entry point used by the sitemap views."""
    return get_sitemap_service().read_or_generate(kind)
