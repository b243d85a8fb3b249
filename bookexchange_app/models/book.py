"""Book listing model (only the image-related columns are mapped)."""

from __future__ import annotations

from typing import Optional

from ..core.extensions import db


class Book(db.Model):
    """A book offered on the exchange and its cover image."""

    __tablename__ = 'ffi_be_books'

    book_id = db.Column('BookID', db.Integer, primary_key=True)
    title = db.Column('Title', db.String(255))
    # Cloudinary public id of the uploaded cover
    image_id = db.Column('ImageID', db.String(255), unique=True, nullable=False)
    # One of the ModerationState names, e.g. 'APPROVED'
    image_state = db.Column('ImageState', db.String(50), nullable=False, default='PENDING_APPROVAL')

    @classmethod
    def image_state_for(cls, image_id: str) -> Optional[str]:
        """Return the stored moderation state for an image key, or None when no book uses it."""
        row = db.session.query(cls.image_state).filter(cls.image_id == image_id).first()
        if row is None:
            return None
        return row[0]

    def __repr__(self) -> str:
        return f'<Book {self.book_id} image={self.image_id!r} state={self.image_state}>'
