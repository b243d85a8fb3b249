"""Database models package for Book Exchange."""

from ..core.extensions import db

from .api_settings import ApiSettings
from .book import Book

__all__ = [
    'db',
    'ApiSettings',
    'Book',
]
