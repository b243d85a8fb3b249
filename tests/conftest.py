import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bookexchange_app import create_app, db
from bookexchange_app.config import Config
from bookexchange_app.models import ApiSettings, Book


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    SITE_URL = 'https://example.com'
    CLOUDINARY_CDN_HOST = 'cloudinary-a.akamaihd.net'
    BOOK_COVERS_STATIC_PATH = 'wp-content/plugins/book-exchange/app/images/book-covers'
    LOG_LEVEL = 'WARNING'
    LOG_DIR = None


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed_books(app):
    """Add the Cloudinary settings row and one book per moderation state."""

    def _seed(cloud_name='demo'):
        if cloud_name is not None:
            db.session.add(ApiSettings(cloudinary_cloud_name=cloud_name))
        db.session.add_all([
            Book(title='Approved book', image_id='abc123', image_state='APPROVED'),
            Book(title='Pending book', image_id='xyz', image_state='PENDING_APPROVAL'),
            Book(title='Rejected book', image_id='bad1', image_state='INAPPROPRIATE'),
            Book(title='Gone book', image_id='gone1', image_state='UNAVAILABLE'),
        ])
        db.session.commit()

    return _seed
