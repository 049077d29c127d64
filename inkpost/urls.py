"""
Inkpost URL Configuration
"""

from django.contrib import admin
from django.urls import path, include

from inkpost.config import config
from blog import sitemap_views

urlpatterns = [
    path(f'{config.security.admin_url}/', admin.site.urls),

    # ── JSON API ──────────────────────────────────────────────────────
    path('api/v1/', include('blog.api_urls')),

    # ── Crawlers ──────────────────────────────────────────────────────
    path('robots.txt', sitemap_views.robots_txt, name='robots_txt'),
    path('sitemap.xml', sitemap_views.sitemap_index, name='sitemap_index'),
    path('sitemaps/posts.xml', sitemap_views.posts_sitemap, name='sitemap_posts'),
    path('sitemaps/posts-audio.xml', sitemap_views.posts_audio_sitemap, name='sitemap_posts_audio'),
    path('sitemaps/tags.xml', sitemap_views.tags_sitemap, name='sitemap_tags'),

    # ── Pages (server-rendered) ───────────────────────────────────────
    path('', include('blog.urls')),
]

handler404 = 'blog.views.custom_404'
