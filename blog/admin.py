"""
Blog Admin - publish/unpublish actions and a sitemap rebuild action
"""

from django.contrib import admin, messages
from django.utils import timezone
from django.utils.html import format_html

from .models import Post, Tag
from .tasks import regenerate_sitemaps_task


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'post_count']
    prepopulated_fields = {'slug': ('name',)}
    search_fields = ['name']

    @admin.display(description='Posts')
    def post_count(self, obj):
        return obj.posts.count()


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ['title', 'author', 'status_badge', 'hidden', 'has_audio', 'views', 'published_at']
    list_filter = ['status', 'hidden', 'published_at', 'tags']
    search_fields = ['title', 'content', 'excerpt']
    prepopulated_fields = {'slug': ('title',)}
    date_hierarchy = 'published_at'
    ordering = ['-created_at']
    filter_horizontal = ['tags']
    readonly_fields = ['views', 'created_at', 'updated_at']

    actions = ['publish_posts', 'unpublish_posts', 'rebuild_sitemaps']

    fieldsets = (
        ('Content', {
            'fields': ('title', 'slug', 'author', 'excerpt', 'content')
        }),
        ('Media', {
            'fields': ('cover_image_url', 'friend_image_url', 'audio_url'),
        }),
        ('Organization', {
            'fields': ('tags', 'status', 'hidden', 'published_at')
        }),
        ('Stats', {
            'fields': ('views', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    @admin.display(description='Status')
    def status_badge(self, obj):
        color = '#28a745' if obj.is_public else '#6c757d'
        label = 'Hidden' if obj.hidden else obj.get_status_display()
        return format_html(
            '<span style="background:{};color:#fff;padding:2px 8px;border-radius:4px">{}</span>',
            color,
            label,
        )

    @admin.display(boolean=True, description='Audio')
    def has_audio(self, obj):
        return obj.has_audio

    @admin.action(description='Publish selected posts')
    def publish_posts(self, request, queryset):
        # Saved one by one so published_at and content signals fire
        count = 0
        for post in queryset.exclude(status=Post.STATUS_PUBLISHED):
            post.status = Post.STATUS_PUBLISHED
            post.published_at = post.published_at or timezone.now()
            post.save()
            count += 1
        self.message_user(request, f'{count} post(s) published.', messages.SUCCESS)

    @admin.action(description='Unpublish selected posts')
    def unpublish_posts(self, request, queryset):
        count = 0
        for post in queryset.filter(status=Post.STATUS_PUBLISHED):
            post.status = Post.STATUS_DRAFT
            post.save()
            count += 1
        self.message_user(request, f'{count} post(s) moved to draft.', messages.SUCCESS)

    @admin.action(description='Rebuild sitemaps in the background')
    def rebuild_sitemaps(self, request, queryset):
        try:
            regenerate_sitemaps_task.delay()
        except Exception as exc:
            self.message_user(request, f'Could not queue sitemap rebuild: {exc}', messages.ERROR)
            return
        self.message_user(request, 'Sitemap rebuild queued.', messages.SUCCESS)
