"""Type definitions for the sitemap subsystem."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class SitemapKind(str, Enum):
    """The four sitemap documents the site serves."""
    INDEX = "index"
    POSTS = "posts"
    POSTS_AUDIO = "posts-audio"
    TAGS = "tags"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value) -> "SitemapKind":
        """Accept a kind or its string value; unknown values raise ValueError."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def storage_name(self) -> str:
        """Path relative to the store root, mirroring the public URL."""
        if self is SitemapKind.INDEX:
            return "sitemap.xml"
        return f"sitemaps/{self.value}.xml"

    @property
    def url_path(self) -> str:
        return f"/{self.storage_name}"


class ChangeFrequency(str, Enum):
    """Sitemap change frequency values used by the blog."""
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class SitemapDocument:
    """One generated sitemap: its kind, XML text and generation time."""
    kind: SitemapKind
    xml: str
    generated_at: datetime
