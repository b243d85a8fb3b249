from flask import Blueprint

blueprint = Blueprint(
    'book_covers',
    __name__,
)

from . import api, views  # noqa: E402,F401
