"""Lazily loaded Cloudinary account settings."""

from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import ConfigurationMissingError
from .cover_store import CoverStore

logger = logging.getLogger(__name__)


class CloudinaryConfig:
    """
    Holds the Cloudinary cloud name for the lifetime of its owner.

    The value is fetched from the store on first use and reused afterwards;
    call ``refresh()`` to force the next access to read it again.
    """

    def __init__(self, store: CoverStore) -> None:
        self.store = store
        self._cloud_name: Optional[str] = None

    @property
    def is_loaded(self) -> bool:
        return self._cloud_name is not None

    def get_cloud_name(self) -> str:
        if self._cloud_name is None:
            cloud_name = self.store.fetch_config()
            if cloud_name is None or not str(cloud_name).strip():
                raise ConfigurationMissingError()
            self._cloud_name = str(cloud_name).strip()
            logger.debug("Loaded Cloudinary cloud name '%s'", self._cloud_name)
        return self._cloud_name

    def refresh(self) -> None:
        """Forget the cached cloud name."""
        self._cloud_name = None
