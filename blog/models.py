"""
Blog Models - posts and tags, the content source for pages and sitemaps
"""

from django.db import models
from django.urls import reverse
from django.utils import timezone
from django.utils.text import slugify
from django.conf import settings


class Tag(models.Model):
    """Tags for blog posts."""
    name = models.CharField(max_length=50, unique=True)
    slug = models.SlugField(max_length=50, unique=True, blank=True)

    class Meta:
        ordering = ['name']

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse('blog:tag_posts', kwargs={'slug': self.slug})


class PostQuerySet(models.QuerySet):

    def public(self):
        """Published and not hidden: what readers and crawlers may see."""
        return self.filter(status=Post.STATUS_PUBLISHED, hidden=False)


class Post(models.Model):
    """Blog post with optional audio narration."""

    STATUS_DRAFT = 'draft'
    STATUS_PUBLISHED = 'published'
    STATUS_CHOICES = [
        (STATUS_DRAFT, 'Draft'),
        (STATUS_PUBLISHED, 'Published'),
    ]

    # Core fields
    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True, blank=True)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='blog_posts'
    )

    # Content
    excerpt = models.TextField(
        max_length=300,
        blank=True,
        help_text="Short description for meta description (max 300 chars)"
    )
    content = models.TextField()

    # Media
    cover_image_url = models.URLField(
        blank=True,
        help_text="Cover image, also used as the sitemap thumbnail"
    )
    friend_image_url = models.URLField(
        blank=True,
        help_text="Secondary image, used as thumbnail when there is no cover"
    )
    audio_url = models.URLField(
        blank=True,
        help_text="Narrated version of the post; listed in the audio sitemap"
    )

    tags = models.ManyToManyField(Tag, blank=True, related_name='posts')

    # Visibility and timestamps
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    hidden = models.BooleanField(
        default=False,
        help_text="Hidden posts stay reachable for admins but are left out of listings and sitemaps"
    )
    views = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    published_at = models.DateTimeField(null=True, blank=True)

    objects = PostQuerySet.as_manager()

    class Meta:
        ordering = ['-published_at', '-created_at']
        indexes = [
            models.Index(fields=['-published_at'], name='blog_post_published_idx'),
            models.Index(fields=['status', 'hidden'], name='blog_post_visibility_idx'),
        ]

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.title)
        self.audio_url = self.audio_url.strip()
        self.cover_image_url = self.cover_image_url.strip()
        self.friend_image_url = self.friend_image_url.strip()
        if self.status == self.STATUS_PUBLISHED and not self.published_at:
            self.published_at = timezone.now()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse('blog:post_detail', kwargs={'slug': self.slug})

    @property
    def is_public(self):
        return self.status == self.STATUS_PUBLISHED and not self.hidden

    @property
    def last_modified(self):
        return self.updated_at or self.published_at or self.created_at

    @property
    def thumbnail_url(self):
        """Cover image, else the friend image, else None."""
        cover = self.cover_image_url.strip()
        if cover:
            return cover
        friend = self.friend_image_url.strip()
        return friend or None

    @property
    def has_audio(self):
        return bool(self.audio_url.strip())

    @property
    def seo_description(self):
        return self.excerpt[:160] if self.excerpt else self.content[:160]

    @property
    def reading_time(self):
        """Estimate reading time in minutes."""
        word_count = len(self.content.split())
        return max(1, round(word_count / 200))
