"""
Review Routes for Review Hub
CRUD and filtered listings over the in-memory review store
"""

import jwt
import structlog
from flask import Blueprint, current_app, jsonify, request

from exceptions import NotFoundError, ValidationError

# Initialize logger
logger = structlog.get_logger(__name__)

# Create Blueprint
reviews_bp = Blueprint('reviews', __name__)


def get_queries():
    return current_app.extensions['review_queries']


def get_request_identity():
    """Identity carried by an optional Bearer token, or None"""
    header = request.headers.get('Authorization', '')
    if not header.startswith('Bearer '):
        return None

    try:
        return current_app.extensions['identity_provider'].decode(header[7:])
    except jwt.InvalidTokenError as e:
        logger.warning("Ignoring invalid token on review request", error=str(e))
        return None


def validation_failed(err):
    return jsonify({
        'error': 'Validation failed',
        'code': 'VALIDATION_ERROR',
        'details': err.messages
    }), 400


def review_not_found(review_id):
    return jsonify({
        'error': 'Review not found',
        'code': 'REVIEW_NOT_FOUND',
        'review_id': review_id
    }), 404


@reviews_bp.route('', methods=['GET'])
def list_reviews():
    """List all reviews, most recent first"""
    logger.info("Fetching all reviews")
    return jsonify(get_queries().list_reviews())


@reviews_bp.route('/type/<review_type>', methods=['GET'])
def list_reviews_by_type(review_type):
    """List reviews of one type (movie or restaurant)"""
    logger.info("Fetching reviews by type", type=review_type)
    return jsonify(get_queries().list_reviews(review_type=review_type))


@reviews_bp.route('/item/<item_id>', methods=['GET'])
def list_reviews_by_item(item_id):
    """List reviews of one catalog item"""
    logger.info("Fetching reviews by item", item_id=item_id)
    return jsonify(get_queries().list_reviews(item_id=item_id))


@reviews_bp.route('/<review_id>', methods=['GET'])
def get_review(review_id):
    """Get specific review"""
    try:
        return jsonify(get_queries().get_review(review_id))
    except NotFoundError:
        return review_not_found(review_id)
    except Exception as e:
        logger.error("Fetching review failed", review_id=review_id, error=str(e))
        return jsonify({
            'error': 'Failed to fetch review',
            'code': 'REVIEW_FETCH_ERROR'
        }), 500


@reviews_bp.route('', methods=['POST'])
def create_review():
    """Create a new review"""
    payload = request.get_json(silent=True)

    try:
        review = get_queries().create_review(payload, identity=get_request_identity())
    except ValidationError as err:
        logger.warning("Review validation failed", errors=err.messages)
        return validation_failed(err)
    except Exception as e:
        logger.error("Creating review failed", error=str(e))
        return jsonify({
            'error': 'Failed to create review',
            'code': 'REVIEW_CREATE_ERROR'
        }), 500

    return jsonify(review), 201


@reviews_bp.route('/<review_id>', methods=['PUT'])
def update_review(review_id):
    """Replace title, content and rating of a review"""
    payload = request.get_json(silent=True)

    try:
        review = get_queries().update_review(review_id, payload)
    except NotFoundError:
        return review_not_found(review_id)
    except ValidationError as err:
        logger.warning("Review update validation failed", review_id=review_id, errors=err.messages)
        return validation_failed(err)
    except Exception as e:
        logger.error("Updating review failed", review_id=review_id, error=str(e))
        return jsonify({
            'error': 'Failed to update review',
            'code': 'REVIEW_UPDATE_ERROR'
        }), 500

    return jsonify({
        'message': 'Review updated successfully',
        'review': review
    })


@reviews_bp.route('/<review_id>', methods=['DELETE'])
def delete_review(review_id):
    """Delete a review"""
    try:
        review = get_queries().delete_review(review_id)
    except NotFoundError:
        return review_not_found(review_id)
    except Exception as e:
        logger.error("Deleting review failed", review_id=review_id, error=str(e))
        return jsonify({
            'error': 'Failed to delete review',
            'code': 'REVIEW_DELETE_ERROR'
        }), 500

    return jsonify({
        'message': 'Review deleted successfully',
        'review': review
    })
