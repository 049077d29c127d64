"""
Blog API Serializers
"""

from rest_framework import serializers
from .models import Post, Tag


class TagSerializer(serializers.ModelSerializer):
    class Meta:
        model = Tag
        fields = ['id', 'name', 'slug']


class TagWithCountSerializer(TagSerializer):
    post_count = serializers.IntegerField(read_only=True)

    class Meta(TagSerializer.Meta):
        fields = TagSerializer.Meta.fields + ['post_count']


class PostListSerializer(serializers.ModelSerializer):
    """Serializer for post lists (minimal data)."""
    tags = TagSerializer(many=True, read_only=True)
    thumbnail_url = serializers.CharField(read_only=True, allow_null=True)
    author_name = serializers.SerializerMethodField()

    class Meta:
        model = Post
        fields = [
            'id', 'title', 'slug', 'excerpt', 'thumbnail_url', 'audio_url',
            'tags', 'author_name', 'published_at', 'views', 'reading_time',
        ]

    def get_author_name(self, obj):
        if obj.author:
            return obj.author.get_full_name() or obj.author.get_username()
        return None


class PostDetailSerializer(PostListSerializer):
    """Serializer for a single post (full data)."""

    class Meta(PostListSerializer.Meta):
        fields = PostListSerializer.Meta.fields + ['content', 'updated_at', 'seo_description']
