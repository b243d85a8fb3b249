from typing import Optional

from bookexchange_app.core.error_handlers import BookExchangeError


class CoverError(BookExchangeError):
    """Base exception for the book covers module."""

    def __init__(
        self,
        message: str = "Cover could not be resolved",
        code: str = 'COVER_ERROR',
        status_code: int = 500,
        details: Optional[dict] = None,
    ):
        super().__init__(message, code=code, status_code=status_code, details=details)


class ConfigurationMissingError(CoverError):
    """Raised when the API settings table holds no Cloudinary cloud name."""

    def __init__(self, message: str = "Cloudinary cloud name is not configured"):
        super().__init__(message, code='CONFIGURATION_MISSING', status_code=500)


class RecordNotFoundError(CoverError):
    """Raised when no book uses the requested image key."""

    def __init__(self, image_key: str, message: str = "No book found for image"):
        self.image_key = image_key
        super().__init__(
            message,
            code='RECORD_NOT_FOUND',
            status_code=404,
            details={'image_key': image_key},
        )


class StoreUnavailableError(CoverError):
    """Raised when the database could not be queried."""

    def __init__(self, operation: str, message: str = "Cover data store is unavailable"):
        self.operation = operation
        super().__init__(
            message,
            code='STORE_UNAVAILABLE',
            status_code=503,
            details={'operation': operation},
        )


class InvalidModerationStateError(CoverError):
    """Raised when a book carries a moderation state this module does not know."""

    def __init__(self, image_key: str, state: object, message: str = "Unknown moderation state"):
        self.image_key = image_key
        self.state = state
        super().__init__(
            message,
            code='INVALID_MODERATION_STATE',
            status_code=500,
            details={'image_key': image_key, 'state': str(state)},
        )


class UnknownPresetError(CoverError):
    """Raised when a cover preset name is not defined."""

    def __init__(self, preset: str, message: str = "Unknown cover preset"):
        self.preset = preset
        super().__init__(
            message,
            code='UNKNOWN_PRESET',
            status_code=404,
            details={'preset': preset},
        )
