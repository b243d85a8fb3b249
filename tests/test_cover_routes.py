import pytest
from flask import render_template_string

from bookexchange_app import create_app, db
from bookexchange_app.modules.book_covers import EXTENSION_KEY

import conftest


def test_all_cover_urls(client, seed_books):
    seed_books()

    response = client.get('/api/covers/abc123')

    assert response.status_code == 200
    payload = response.get_json()
    assert payload['success'] is True
    assert payload['data']['image_key'] == 'abc123'
    assert payload['data']['urls'] == {
        'background_small': '//cloudinary-a.akamaihd.net/demo/image/upload/c_fill,e_vibrance:100,g_north,h_100,w_300/abc123',
        'background_large': '//cloudinary-a.akamaihd.net/demo/image/upload/,c_fill,e_blur:800,g_north,h_350,w_1500/e_vibrance:100/abc123',
        'cover': '//cloudinary-a.akamaihd.net/demo/image/upload/c_pad,e_vibrance:100,h_355,w_275/abc123',
        'cover_preview': '//cloudinary-a.akamaihd.net/demo/image/upload/c_pad,e_vibrance:100,h_300,w_200/abc123',
    }


def test_single_cover_url(client, seed_books):
    seed_books()

    response = client.get('/api/covers/bad1/cover_preview')

    assert response.status_code == 200
    assert response.get_json()['data'] == {
        'image_key': 'bad1',
        'preset': 'cover_preview',
        'url': 'https://example.com/wp-content/plugins/book-exchange/app/images/book-covers/inappropriate-preview.jpg',
    }


def test_unknown_preset_is_404(client, seed_books):
    seed_books()

    response = client.get('/api/covers/abc123/poster')

    assert response.status_code == 404
    payload = response.get_json()
    assert payload['success'] is False
    assert payload['code'] == 'UNKNOWN_PRESET'
    assert payload['error'] == 'UnknownPresetError'


def test_unknown_image_is_404(client, seed_books):
    seed_books()

    response = client.get('/api/covers/missing')

    assert response.status_code == 404
    assert response.get_json()['code'] == 'RECORD_NOT_FOUND'
    assert response.get_json()['details'] == {'image_key': 'missing'}


def test_missing_configuration_is_500(client, seed_books):
    seed_books(cloud_name=None)

    response = client.get('/api/covers/abc123/cover')

    assert response.status_code == 500
    assert response.get_json()['code'] == 'CONFIGURATION_MISSING'


def test_redirect_to_cloudinary(client, seed_books):
    seed_books()

    response = client.get('/covers/cover/abc123')

    assert response.status_code == 302
    assert response.headers['Location'] == (
        '//cloudinary-a.akamaihd.net/demo/image/upload/c_pad,e_vibrance:100,h_355,w_275/abc123'
    )


def test_redirect_to_placeholder(client, seed_books):
    seed_books()

    response = client.get('/covers/background_large/gone1')

    assert response.status_code == 302
    assert response.headers['Location'] == (
        'https://example.com/wp-content/plugins/book-exchange/app/images/'
        'book-covers/unavailable-background-large.jpg'
    )


def test_unknown_api_path_is_json_404(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == 404
    assert response.get_json()['code'] == 'NOT_FOUND'


def test_template_filters(app, seed_books):
    seed_books()

    with app.test_request_context('/'):
        html = render_template_string(
            '<img src="{{ key|cover_preview }}"><div style="background: url({{ pending|cover_background_small }})">',
            key='abc123',
            pending='xyz',
        )

    assert 'c_pad,e_vibrance:100,h_300,w_200/abc123' in html
    assert 'book-covers/pending-background-small.jpg' in html


def test_module_attaches_resolver(app):
    resolver = app.extensions[EXTENSION_KEY]

    assert resolver.cdn_host == 'cloudinary-a.akamaihd.net'
    assert resolver.static_path == 'wp-content/plugins/book-exchange/app/images/book-covers'
    assert {'cover', 'cover_preview', 'cover_background_small', 'cover_background_large'} <= set(app.jinja_env.filters)


class RequestHostConfig(conftest.TestConfig):
    SITE_URL = ''


@pytest.fixture
def request_host_app():
    app = create_app(RequestHostConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


def test_placeholder_uses_request_host_without_site_url(request_host_app):
    from bookexchange_app.models import ApiSettings, Book

    db.session.add(ApiSettings(cloudinary_cloud_name='demo'))
    db.session.add(Book(title='Pending', image_id='xyz', image_state='PENDING_APPROVAL'))
    db.session.commit()

    response = request_host_app.test_client().get(
        '/api/covers/xyz/cover', base_url='https://books.example.org'
    )

    assert response.get_json()['data']['url'] == (
        'https://books.example.org/wp-content/plugins/book-exchange/app/images/'
        'book-covers/pending-cover.jpg'
    )
