from typing import Dict, Optional

from flask import current_app

from .services.cover_resolver import CoverUrlResolver

EXTENSION_KEY = 'cover_resolver'


class CoverInterface:
    """
    Public Gateway for the Book Covers module.
    Pattern: Facade over the resolver attached to the current app.
    """

    @staticmethod
    def resolver() -> CoverUrlResolver:
        return current_app.extensions[EXTENSION_KEY]

    @staticmethod
    def background_small(image_key: str) -> str:
        return CoverInterface.resolver().background_small(image_key)

    @staticmethod
    def background_large(image_key: str) -> str:
        return CoverInterface.resolver().background_large(image_key)

    @staticmethod
    def cover(image_key: str) -> str:
        return CoverInterface.resolver().cover(image_key)

    @staticmethod
    def cover_preview(image_key: str) -> str:
        return CoverInterface.resolver().cover_preview(image_key)

    @staticmethod
    def url_for_preset(preset: str, image_key: str) -> str:
        """Resolve by preset name. Raises UnknownPresetError for unknown names."""
        return CoverInterface.resolver().build(preset, image_key)

    @staticmethod
    def all_urls(image_key: str) -> Dict[str, str]:
        return CoverInterface.resolver().build_all(image_key)

    @staticmethod
    def placeholder_prefix(image_key: str) -> Optional[str]:
        return CoverInterface.resolver().check_status(image_key)

    @staticmethod
    def refresh_config() -> None:
        """Drop the cached cloud name, e.g. after the API settings were edited."""
        CoverInterface.resolver().config.refresh()
