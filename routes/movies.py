"""
Movie Catalog Routes for Review Hub
"""

import structlog
from flask import Blueprint, current_app, jsonify, request
from marshmallow import ValidationError

from exceptions import NotFoundError
from schemas import MovieSearchSchema

logger = structlog.get_logger(__name__)

movies_bp = Blueprint('movies', __name__)


def get_catalog():
    return current_app.extensions['fixture_store']


@movies_bp.route('/search', methods=['GET'])
def search_movies():
    """Case-insensitive title search"""
    schema = MovieSearchSchema()

    try:
        params = schema.load(request.args)
    except ValidationError as err:
        logger.warning("Movie search validation failed", errors=err.messages)
        return jsonify({
            'error': 'Query parameter is required',
            'code': 'VALIDATION_ERROR',
            'details': err.messages
        }), 400

    try:
        return jsonify(get_catalog().search_movies(params['query'], limit=params['limit']))
    except Exception as e:
        logger.error("Movie search failed", error=str(e))
        return jsonify({
            'error': 'Failed to search movies',
            'code': 'MOVIE_SEARCH_ERROR'
        }), 500


@movies_bp.route('/popular', methods=['GET'])
def popular_movies():
    """Popular movies"""
    logger.info("Fetching popular movies")
    return jsonify(get_catalog().popular_movies())


@movies_bp.route('/now-playing', methods=['GET'])
def now_playing_movies():
    """Movies currently in theaters"""
    logger.info("Fetching now playing movies")
    return jsonify(get_catalog().now_playing_movies())


@movies_bp.route('/<movie_id>', methods=['GET'])
def get_movie(movie_id):
    """Get movie details"""
    try:
        return jsonify(get_catalog().get_movie(movie_id))
    except NotFoundError:
        return jsonify({
            'error': 'Movie not found',
            'code': 'MOVIE_NOT_FOUND'
        }), 404
    except Exception as e:
        logger.error("Movie details failed", movie_id=movie_id, error=str(e))
        return jsonify({
            'error': 'Failed to fetch movie details',
            'code': 'MOVIE_DETAILS_ERROR'
        }), 500
