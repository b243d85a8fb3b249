from flask import jsonify

from bookexchange_app.core.error_handlers import success_response
from ..interface import CoverInterface
from ..schemas import CoverUrlSchema, CoverUrlsSchema
from . import blueprint


@blueprint.route('/api/covers/<image_key>', methods=['GET'])
def get_cover_urls(image_key):
    """
    Return the URL of every cover preset for one image.
    """
    data = {
        'image_key': image_key,
        'urls': CoverInterface.all_urls(image_key),
    }
    return jsonify(success_response(CoverUrlsSchema().dump(data)))


@blueprint.route('/api/covers/<image_key>/<preset>', methods=['GET'])
def get_cover_url(image_key, preset):
    """
    Return the URL of a single cover preset.
    """
    data = {
        'image_key': image_key,
        'preset': preset,
        'url': CoverInterface.url_for_preset(preset, image_key),
    }
    return jsonify(success_response(CoverUrlSchema().dump(data)))
