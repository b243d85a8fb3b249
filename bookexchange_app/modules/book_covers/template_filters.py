"""
Jinja2 filters for book cover URLs.

Usage in templates: ``<img src="{{ book.image_id|cover_preview }}">``
"""
from .interface import CoverInterface


def register_filters(app):
    """Register cover filters with the Flask app."""
    app.jinja_env.filters['cover_background_small'] = CoverInterface.background_small
    app.jinja_env.filters['cover_background_large'] = CoverInterface.background_large
    app.jinja_env.filters['cover'] = CoverInterface.cover
    app.jinja_env.filters['cover_preview'] = CoverInterface.cover_preview
