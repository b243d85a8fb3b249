# File: bookexchange_app/config.py

import os

from dotenv import load_dotenv

load_dotenv()

# Thư mục gốc của dự án: file này nằm ở bookexchange_app/ nên đi lên 1 cấp
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "bookexchange.db")


class Config:
    """Configuration for the Book Exchange app."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Site root used for placeholder covers. Empty means "use the request host".
    SITE_URL = os.environ.get('SITE_URL', '')

    # Cloudinary delivery
    CLOUDINARY_CDN_HOST = os.environ.get('CLOUDINARY_CDN_HOST', 'cloudinary-a.akamaihd.net')
    BOOK_COVERS_STATIC_PATH = os.environ.get(
        'BOOK_COVERS_STATIC_PATH',
        'wp-content/plugins/book-exchange/app/images/book-covers',
    )

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')

    @classmethod
    def init_app(cls, app):
        """Create the folders the app writes to."""
        if app.config['SQLALCHEMY_DATABASE_URI'] == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        if app.config.get('LOG_DIR'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
