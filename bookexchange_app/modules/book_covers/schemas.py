from marshmallow import Schema, fields, validate

from .logics.presets import PRESET_NAMES


class CoverUrlsSchema(Schema):
    image_key = fields.String(required=True)
    urls = fields.Dict(keys=fields.String(validate=validate.OneOf(PRESET_NAMES)), values=fields.String())


class CoverUrlSchema(Schema):
    image_key = fields.String(required=True)
    preset = fields.String(required=True, validate=validate.OneOf(PRESET_NAMES))
    url = fields.String(required=True)
