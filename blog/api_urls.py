"""
Blog API URL Configuration
"""

from django.urls import path
from . import api_views

app_name = 'blog_api'

urlpatterns = [
    path('posts/', api_views.PostListAPIView.as_view(), name='post_list'),
    path('posts/<slug:slug>/', api_views.PostDetailAPIView.as_view(), name='post_detail'),
    path('tags/', api_views.TagListAPIView.as_view(), name='tag_list'),
    path('shorten-url/', api_views.shorten_url, name='shorten_url'),
    path('sitemaps/revalidate/', api_views.revalidate_sitemaps, name='revalidate_sitemaps'),
]
