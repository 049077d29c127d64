"""
Blog page URL Configuration
"""

from django.urls import path
from . import views

app_name = 'blog'

urlpatterns = [
    path('', views.PostListView.as_view(), name='post_list'),
    path('posts/<slug:slug>/', views.PostDetailView.as_view(), name='post_detail'),
    path('tags/<slug:slug>/', views.TagPostsView.as_view(), name='tag_posts'),
    path('search/', views.SearchView.as_view(), name='search'),
]
