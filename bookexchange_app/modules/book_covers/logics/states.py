"""Moderation states of uploaded book covers and their placeholder images."""

from enum import Enum
from typing import Optional


class ModerationState(Enum):
    """Review status of a book cover, stored by name in ``ffi_be_books.ImageState``."""
    APPROVED = "APPROVED"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    INAPPROPRIATE = "INAPPROPRIATE"
    UNAVAILABLE = "UNAVAILABLE"

    @classmethod
    def parse(cls, raw: str) -> "ModerationState":
        """Convert a stored value into a state. Raises ValueError for unknown values."""
        if isinstance(raw, cls):
            return raw
        return cls(str(raw).strip().upper())


def placeholder_prefix_name(state: ModerationState) -> Optional[str]:
    """
    Return the file-name prefix of the placeholder cover for a state,
    or None when the real cover may be shown.
    """
    if state is ModerationState.APPROVED:
        return None
    if state is ModerationState.PENDING_APPROVAL:
        return "pending-"
    if state is ModerationState.INAPPROPRIATE:
        return "inappropriate-"
    if state is ModerationState.UNAVAILABLE:
        return "unavailable-"
    raise ValueError(f"Unhandled moderation state: {state!r}")
