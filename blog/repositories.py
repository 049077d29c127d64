"""
Blog Repositories
=================

Data-access layer for Post and Tag models.
"""

from django.db.models import F, Max, Q, QuerySet, Count

from core.repositories import BaseRepository
from .models import Post, Tag


class PostRepository(BaseRepository[Post]):
    """Blog post data access."""

    model = Post

    @classmethod
    def get_public(cls) -> QuerySet:
        """Return public posts, newest first."""
        return cls.queryset().public().select_related("author").prefetch_related("tags")

    @classmethod
    def get_public_by_slug(cls, slug: str):
        """Get a single public post by slug, or None."""
        return cls.get_public().filter(slug=slug).first()

    @classmethod
    def search_public(cls, query: str) -> QuerySet:
        """Case-insensitive search across title, excerpt, and content."""
        return cls.get_public().filter(
            Q(title__icontains=query)
            | Q(excerpt__icontains=query)
            | Q(content__icontains=query)
        )

    @classmethod
    def get_by_tag(cls, tag_slug: str) -> QuerySet:
        """Get public posts filtered by tag slug."""
        return cls.get_public().filter(tags__slug=tag_slug)

    @classmethod
    def get_for_sitemap(cls) -> QuerySet:
        """Public posts with a slug, ordered for stable sitemap output."""
        return (
            cls.queryset().public()
            .exclude(slug="")
            .order_by("-published_at", "-created_at", "pk")
        )

    @classmethod
    def get_with_audio_for_sitemap(cls) -> QuerySet:
        # Rows written through update() bypass save() and may hold bare whitespace
        return cls.get_for_sitemap().exclude(audio_url__regex=r"^\s*$")

    @classmethod
    def increment_views(cls, post: Post) -> None:
        """Atomically bump the view counter without touching updated_at."""
        cls.queryset().filter(pk=post.pk).update(views=F("views") + 1)


class TagRepository(BaseRepository[Tag]):
    """Blog tag data access."""

    model = Tag

    @classmethod
    def get_by_slug(cls, slug: str):
        """Get tag by slug, or None."""
        return cls.get_one_or_none(slug=slug)

    @classmethod
    def get_with_post_count(cls) -> QuerySet:
        """Return tags annotated with their public post count."""
        return cls.queryset().annotate(
            post_count=Count("posts", filter=_public_posts_filter())
        ).order_by("name")

    @classmethod
    def get_for_sitemap(cls) -> QuerySet:
        """
        Tags that have at least one public post, annotated with
        ``last_post_modified``: the newest ``updated_at`` among those posts.
        """
        return (
            cls.queryset().annotate(
                last_post_modified=Max("posts__updated_at", filter=_public_posts_filter())
            )
            .filter(last_post_modified__isnull=False)
            .exclude(slug="")
            .order_by("slug")
        )


def _public_posts_filter() -> Q:
    return Q(posts__status=Post.STATUS_PUBLISHED, posts__hidden=False)
