from flask import redirect

from ..interface import CoverInterface
from . import blueprint


@blueprint.route('/covers/<preset>/<image_key>', methods=['GET'])
def cover_image(preset, image_key):
    """Redirect to the image for ``preset``, usable directly as an <img> src."""
    return redirect(CoverInterface.url_for_preset(preset, image_key), code=302)
