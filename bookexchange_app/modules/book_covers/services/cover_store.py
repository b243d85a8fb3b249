"""Read access to the two tables the cover resolver depends on."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from bookexchange_app.models import ApiSettings, Book
from ..exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class CoverStore(ABC):
    """Data access needed to resolve cover URLs."""

    @abstractmethod
    def fetch_config(self) -> Optional[str]:
        """Return the Cloudinary cloud name of the first settings row, or None if there is none."""

    @abstractmethod
    def fetch_moderation_state(self, image_key: str) -> Optional[str]:
        """Return the stored moderation state of the book using ``image_key``, or None."""


class SqlAlchemyCoverStore(CoverStore):
    """CoverStore backed by the Flask-SQLAlchemy session."""

    def fetch_config(self) -> Optional[str]:
        try:
            return ApiSettings.first_cloud_name()
        except SQLAlchemyError as exc:
            logger.error("Failed to read Cloudinary settings: %s", exc)
            raise StoreUnavailableError('fetch_config') from exc

    def fetch_moderation_state(self, image_key: str) -> Optional[str]:
        try:
            return Book.image_state_for(image_key)
        except SQLAlchemyError as exc:
            logger.error("Failed to read moderation state for %s: %s", image_key, exc)
            raise StoreUnavailableError('fetch_moderation_state') from exc
