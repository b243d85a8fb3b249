from typing import Optional

from .routes import blueprint
from .exceptions import (
    ConfigurationMissingError,
    CoverError,
    InvalidModerationStateError,
    RecordNotFoundError,
    StoreUnavailableError,
    UnknownPresetError,
)
from .config import BookCoversConfig
from .interface import EXTENSION_KEY, CoverInterface
from .logics.states import ModerationState
from .services.cloudinary_config import CloudinaryConfig
from .services.cover_resolver import CoverUrlResolver
from .services.cover_store import CoverStore, SqlAlchemyCoverStore
from .template_filters import register_filters


def setup_module(app, store: Optional[CoverStore] = None):
    """
    Initialize the Book Covers module.
    1. Build the resolver and attach it to the app.
    2. Register Blueprint.
    3. Register template filters.
    """
    BookCoversConfig.apply_defaults(app)

    store = store or SqlAlchemyCoverStore()
    app.extensions[EXTENSION_KEY] = CoverUrlResolver(
        CloudinaryConfig(store),
        store,
        cdn_host=app.config['CLOUDINARY_CDN_HOST'],
        static_path=app.config['BOOK_COVERS_STATIC_PATH'],
    )

    app.register_blueprint(blueprint)
    register_filters(app)

    app.logger.info("Book Covers Module Initialized.")


__all__ = [
    'setup_module',
    'EXTENSION_KEY',
    'CoverInterface',
    'CoverUrlResolver',
    'CloudinaryConfig',
    'CoverStore',
    'SqlAlchemyCoverStore',
    'ModerationState',
    'CoverError',
    'ConfigurationMissingError',
    'RecordNotFoundError',
    'StoreUnavailableError',
    'InvalidModerationStateError',
    'UnknownPresetError',
]
