"""Build display URLs for book covers.

A cover is served from Cloudinary with one of the fixed presets once it has
been approved. Until then (or when it was rejected or the book is gone) a
bundled placeholder image matching the moderation state is used instead:

    pending-<suffix>        cover is waiting for approval
    inappropriate-<suffix>  cover was rejected
    unavailable-<suffix>    cover cannot be shown
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Union

from flask import current_app, has_app_context, has_request_context, request

from ..exceptions import (
    CoverError,
    InvalidModerationStateError,
    RecordNotFoundError,
    UnknownPresetError,
)
from ..logics.presets import (
    BACKGROUND_LARGE,
    BACKGROUND_SMALL,
    COVER,
    COVER_PRESETS,
    COVER_PREVIEW,
    CoverPreset,
    find_preset,
)
from ..logics.states import ModerationState, placeholder_prefix_name
from .cloudinary_config import CloudinaryConfig
from .cover_store import CoverStore

logger = logging.getLogger(__name__)

DEFAULT_CDN_HOST = 'cloudinary-a.akamaihd.net'
DEFAULT_STATIC_PATH = 'wp-content/plugins/book-exchange/app/images/book-covers'


def current_site_url() -> str:
    """Site root for the current app: ``SITE_URL`` if set, else the request host."""
    if has_app_context():
        configured = current_app.config.get('SITE_URL')
        if configured:
            return str(configured).rstrip('/')
    if has_request_context():
        return request.host_url.rstrip('/')
    raise CoverError("Site URL is not configured and no request is active", code='SITE_URL_MISSING')


class CoverUrlResolver:
    """Resolve an image key to a Cloudinary URL or a placeholder cover URL."""

    def __init__(
        self,
        config: CloudinaryConfig,
        store: CoverStore,
        cdn_host: str = DEFAULT_CDN_HOST,
        static_path: str = DEFAULT_STATIC_PATH,
        site_url: Union[str, Callable[[], str], None] = None,
    ) -> None:
        self.config = config
        self.store = store
        self.cdn_host = cdn_host.strip('/')
        self.static_path = static_path.strip('/')
        if site_url is None:
            self._site_url = current_site_url
        elif callable(site_url):
            self._site_url = site_url
        else:
            fixed = str(site_url).rstrip('/')
            self._site_url = lambda: fixed

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def check_status(self, image_key: str) -> Optional[str]:
        """
        Return the start of the placeholder URL for the cover's moderation
        state, or None when the cover is approved. Callers append the file
        name of the placeholder they need.
        """
        raw_state = self.store.fetch_moderation_state(image_key)
        if raw_state is None:
            raise RecordNotFoundError(image_key)

        try:
            state = ModerationState.parse(raw_state)
        except ValueError as exc:
            raise InvalidModerationStateError(image_key, raw_state) from exc

        prefix_name = placeholder_prefix_name(state)
        if prefix_name is None:
            return None

        return f"{self._site_url()}/{self.static_path}/{prefix_name}"

    def get_preset(self, name: str) -> CoverPreset:
        preset = find_preset(name)
        if preset is None:
            raise UnknownPresetError(name)
        return preset

    # ------------------------------------------------------------------
    # URL builders
    # ------------------------------------------------------------------

    def build(self, preset: Union[CoverPreset, str], image_key: str) -> str:
        """Build the URL of ``image_key`` rendered with ``preset``."""
        if not isinstance(preset, CoverPreset):
            preset = self.get_preset(preset)

        cloud_name = self.config.get_cloud_name()
        placeholder = self.check_status(image_key)

        if placeholder:
            logger.debug("Serving placeholder %s for image %s", preset.placeholder_suffix, image_key)
            return placeholder + preset.placeholder_suffix

        return (
            "//" + self.cdn_host + "/" + cloud_name + "/image/upload/"
            + preset.transformation + "/" + image_key
        )

    def background_small(self, image_key: str) -> str:
        """Small background for the sidebar quick link boxes."""
        return self.build(COVER_PRESETS[BACKGROUND_SMALL], image_key)

    def background_large(self, image_key: str) -> str:
        """Large blurred splash background for the book details page."""
        return self.build(COVER_PRESETS[BACKGROUND_LARGE], image_key)

    def cover(self, image_key: str) -> str:
        """Scaled cover for the book details page."""
        return self.build(COVER_PRESETS[COVER], image_key)

    def cover_preview(self, image_key: str) -> str:
        """Scaled cover for search results and browsing pages."""
        return self.build(COVER_PRESETS[COVER_PREVIEW], image_key)

    def build_all(self, image_key: str) -> Dict[str, str]:
        """URLs of every preset for one image, keyed by preset name."""
        return {name: self.build(preset, image_key) for name, preset in COVER_PRESETS.items()}
