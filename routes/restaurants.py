"""
Restaurant Catalog Routes for Review Hub
"""

import structlog
from flask import Blueprint, current_app, jsonify, request
from marshmallow import ValidationError

from exceptions import NotFoundError
from schemas import RestaurantSearchSchema

logger = structlog.get_logger(__name__)

restaurants_bp = Blueprint('restaurants', __name__)


def get_catalog():
    return current_app.extensions['fixture_store']


def restaurant_not_found():
    return jsonify({
        'error': 'Restaurant not found',
        'code': 'RESTAURANT_NOT_FOUND'
    }), 404


@restaurants_bp.route('/search', methods=['GET'])
def search_restaurants():
    """Search by name or category; location and term fall back to defaults"""
    schema = RestaurantSearchSchema()

    try:
        params = schema.load(request.args)
    except ValidationError as err:
        logger.warning("Restaurant search validation failed", errors=err.messages)
        return jsonify({
            'error': 'Validation failed',
            'code': 'VALIDATION_ERROR',
            'details': err.messages
        }), 400

    try:
        return jsonify(get_catalog().search_restaurants(**params))
    except Exception as e:
        logger.error("Restaurant search failed", error=str(e))
        return jsonify({
            'error': 'Failed to fetch restaurants',
            'code': 'RESTAURANT_SEARCH_ERROR'
        }), 500


@restaurants_bp.route('/<restaurant_id>', methods=['GET'])
def get_restaurant(restaurant_id):
    """Get restaurant details"""
    try:
        return jsonify(get_catalog().get_restaurant(restaurant_id))
    except NotFoundError:
        return restaurant_not_found()
    except Exception as e:
        logger.error("Restaurant details failed", restaurant_id=restaurant_id, error=str(e))
        return jsonify({
            'error': 'Failed to fetch restaurant details',
            'code': 'RESTAURANT_DETAILS_ERROR'
        }), 500


@restaurants_bp.route('/<restaurant_id>/reviews', methods=['GET'])
def get_restaurant_reviews(restaurant_id):
    """Third-party reviews for a restaurant"""
    try:
        return jsonify(get_catalog().restaurant_reviews(restaurant_id))
    except NotFoundError:
        return restaurant_not_found()
    except Exception as e:
        logger.error("Restaurant reviews failed", restaurant_id=restaurant_id, error=str(e))
        return jsonify({
            'error': 'Failed to fetch restaurant reviews',
            'code': 'RESTAURANT_REVIEWS_ERROR'
        }), 500
