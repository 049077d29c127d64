"""
Blog Views - Server-side rendered pages
"""

from django.http import Http404
from django.shortcuts import render
from django.views.generic import ListView, DetailView

from .repositories import PostRepository, TagRepository


def custom_404(request, exception=None):
    return render(request, '404.html', status=404)


class PostListView(ListView):
    """Homepage listing all public posts."""
    template_name = 'blog/post_list.html'
    context_object_name = 'posts'
    paginate_by = 10

    def get_queryset(self):
        return PostRepository.get_public()

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['page_title'] = 'Latest posts'
        return context


class PostDetailView(DetailView):
    """Individual post page. Counts a view for human visitors."""
    template_name = 'blog/post_detail.html'
    context_object_name = 'post'

    def get_object(self, queryset=None):
        post = PostRepository.get_public_by_slug(self.kwargs['slug'])
        if post is None:
            raise Http404("Post not found")
        return post

    def get(self, request, *args, **kwargs):
        response = super().get(request, *args, **kwargs)
        if not getattr(request, 'is_bot', False):
            PostRepository.increment_views(self.object)
        return response

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        post = self.object
        tag_ids = post.tags.values_list('id', flat=True)
        context['related_posts'] = (
            PostRepository.get_public()
            .filter(tags__in=tag_ids)
            .exclude(pk=post.pk)
            .distinct()[:3]
        )
        return context


class TagPostsView(ListView):
    """Posts filtered by tag."""
    template_name = 'blog/tag_posts.html'
    context_object_name = 'posts'
    paginate_by = 10

    def get_queryset(self):
        self.tag = TagRepository.get_by_slug(self.kwargs['slug'])
        if self.tag is None:
            raise Http404("Tag not found")
        return PostRepository.get_by_tag(self.tag.slug)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['tag'] = self.tag
        context['page_title'] = f'#{self.tag.name}'
        return context


class SearchView(ListView):
    """Search public posts."""
    template_name = 'blog/search.html'
    context_object_name = 'posts'
    paginate_by = 10

    def get_queryset(self):
        query = self.request.GET.get('q', '').strip()
        if query:
            return PostRepository.search_public(query)
        return PostRepository.get_public().none()

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['query'] = self.request.GET.get('q', '').strip()
        context['page_title'] = f"Search: {context['query']}"
        return context
