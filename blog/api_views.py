"""
Blog API Views - REST endpoints for posts, tags, URL shortening and
sitemap regeneration
"""

import logging

from django.http import HttpResponse
from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.response import Response

from core.exceptions import InkpostError
from .repositories import PostRepository, TagRepository
from .serializers import PostListSerializer, PostDetailSerializer, TagWithCountSerializer
from .services.sitemap_service import get_sitemap_service
from .services.url_shortener import UrlShortenerService

logger = logging.getLogger(__name__)


class PostListAPIView(generics.ListAPIView):
    """
    List public posts.
    Supports filtering by tag and search.
    """
    serializer_class = PostListSerializer
    permission_classes = [AllowAny]

    def get_queryset(self):
        search = self.request.query_params.get('search', '').strip()
        queryset = PostRepository.search_public(search) if search else PostRepository.get_public()

        tag = self.request.query_params.get('tag')
        if tag:
            queryset = queryset.filter(tags__slug=tag)

        return queryset


class PostDetailAPIView(generics.RetrieveAPIView):
    """Get a single public post by slug."""
    serializer_class = PostDetailSerializer
    permission_classes = [AllowAny]
    lookup_field = 'slug'

    def get_queryset(self):
        return PostRepository.get_public()


class TagListAPIView(generics.ListAPIView):
    """List tags with their public post count."""
    serializer_class = TagWithCountSerializer
    permission_classes = [AllowAny]
    pagination_class = None

    def get_queryset(self):
        return TagRepository.get_with_post_count()


@api_view(['GET'])
@permission_classes([AllowAny])
def shorten_url(request):
    """
    Shorten ``?url=`` through is.gd and relay the short link as plain text.

    400 when ``url`` is missing, 500 when the upstream fails.
    """
    short_url = UrlShortenerService().shorten(request.query_params.get('url'))
    return HttpResponse(short_url, content_type='text/plain')


@api_view(['POST'])
@permission_classes([IsAdminUser])
def revalidate_sitemaps(request):
    """Rebuild every sitemap after content changes (staff only)."""
    try:
        get_sitemap_service().generate_all()
    except InkpostError as exc:
        logger.error("Failed to regenerate sitemaps: %s", exc.message)
        return Response(
            {"error": "Failed to regenerate sitemaps"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return Response({"ok": True})
