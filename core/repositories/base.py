"""
Generic Base Repository
=======================

Typed repository giving every app the same lookup helpers; app-specific
repositories inherit from this and add their own queries.

Usage:
    from core.repositories import BaseRepository
    from blog.models import Tag

    class TagRepository(BaseRepository[Tag]):
        model = Tag

        @classmethod
        def get_by_slug(cls, slug):
            return cls.get_one_or_none(slug=slug)
"""

from typing import TypeVar, Generic, Type, Optional
from django.db import models
from django.db.models import QuerySet

T = TypeVar("T", bound=models.Model)


class BaseRepository(Generic[T]):
    """
    Subclasses MUST set the `model` class attribute:

        class PostRepository(BaseRepository[Post]):
            model = Post
    """

    model: Type[T]

    @classmethod
    def queryset(cls) -> QuerySet[T]:
        """Starting point for every query (model's default manager)."""
        return cls.model.objects.all()

    @classmethod
    def get_one_or_none(cls, **kwargs) -> Optional[T]:
        """First instance matching the filters, or None."""
        return cls.queryset().filter(**kwargs).first()
