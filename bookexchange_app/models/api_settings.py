"""Third-party API credentials shared by the whole site."""

from __future__ import annotations

from typing import Optional

from ..core.extensions import db


class ApiSettings(db.Model):
    """Single-row table holding the external API account settings.

    Only the first row is read; the table is managed from the site admin.
    """

    __tablename__ = 'ffi_be_apis'

    api_id = db.Column('ID', db.Integer, primary_key=True)
    cloudinary_cloud_name = db.Column('CloudinaryCloudName', db.String(255), nullable=True)

    @classmethod
    def first_cloud_name(cls) -> Optional[str]:
        """Return the cloud name of the first settings row, or None when the table is empty."""
        row = (
            db.session.query(cls.cloudinary_cloud_name)
            .order_by(cls.api_id.asc())
            .first()
        )
        if row is None:
            return None
        return row[0]

    def __repr__(self) -> str:
        return f'<ApiSettings {self.cloudinary_cloud_name!r}>'
