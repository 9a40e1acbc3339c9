"""
Review Hub - Request Validation Schemas
marshmallow schemas for review drafts, review patches, auth and catalog queries
"""

from marshmallow import Schema, fields, validate, EXCLUDE

from models import REVIEW_TYPES


class ReviewDraftSchema(Schema):
    """Body of POST /reviews"""

    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=validate.Length(min=1))
    content = fields.String(required=True, validate=validate.Length(min=1))
    rating = fields.Integer(required=True, validate=validate.Range(min=1, max=5))
    type = fields.String(required=True, validate=validate.OneOf(REVIEW_TYPES))
    item_id = fields.String(data_key='itemId', required=True, validate=validate.Length(min=1))
    item_name = fields.String(data_key='itemName', required=True, validate=validate.Length(min=1))
    user_id = fields.String(data_key='userId', allow_none=True, load_default=None)
    user_name = fields.String(data_key='userName', allow_none=True, load_default=None)


class ReviewPatchSchema(Schema):
    """Body of PUT /reviews/<id>; only these fields are editable"""

    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=validate.Length(min=1))
    content = fields.String(required=True, validate=validate.Length(min=1))
    rating = fields.Integer(required=True, validate=validate.Range(min=1, max=5))


class VerifySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    token = fields.String(allow_none=True, load_default=None)


class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    password = fields.String(required=True, validate=validate.Length(min=1))


class RegisterSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    password = fields.String(required=True, validate=validate.Length(min=1))
    name = fields.String(allow_none=True, load_default=None)


class MovieSearchSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    query = fields.String(required=True, validate=validate.Length(min=1))
    limit = fields.Integer(allow_none=True, load_default=None, validate=validate.Range(min=1))


class RestaurantSearchSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    location = fields.String(load_default='New York')
    term = fields.String(load_default='restaurants')
    limit = fields.Integer(load_default=20, validate=validate.Range(min=1))
