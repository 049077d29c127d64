"""
Blog services: sitemap generation/storage and the URL-shortening client.

Import from the submodules directly, e.g.
``from blog.services.sitemap_service import read_or_generate_sitemap``.
"""
