#!/usr/bin/env python3
"""
Review Hub - Main Flask Application
Review sharing API for movies and restaurants
"""

import logging
import os
import sys
from datetime import datetime, timedelta, timezone

import structlog
from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_cors import CORS

from routes.auth import auth_bp
from routes.movies import movies_bp
from routes.restaurants import restaurants_bp
from routes.reviews import reviews_bp
from services.fixtures import FixtureStore, demo_reviews
from services.identity import MockIdentityProvider
from services.review_queries import ReviewQueries
from services.review_store import InMemoryReviewStore

# Load environment variables
load_dotenv()

VERSION = '1.0.0'


def env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Configuration
class Config:
    # Flask Settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Token Configuration
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET', 'jwt-secret-change-in-production-0123456789')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get('JWT_EXPIRES_HOURS', '8')))

    # CORS Settings
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', 'http://localhost:3000,http://localhost:5000').split(',')

    # Demo reviews loaded into a fresh store at startup
    SEED_DEMO_DATA = env_flag('SEED_DEMO_DATA', True)

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


def configure_logging(level='INFO'):
    """Route structlog through stdlib logging with JSON output"""
    logging.basicConfig(format='%(message)s', stream=sys.stdout, level=level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger(__name__)


def create_app(config_overrides=None, review_store=None, identity_provider=None, fixture_store=None):
    """Application factory.

    Collaborators can be injected for tests; otherwise a fresh in-memory
    review store, the fixture catalog and the mock identity provider are
    built here and live as long as the app does.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app.config['LOG_LEVEL'])

    # Initialize Extensions
    CORS(app, origins=app.config['CORS_ORIGINS'])

    if review_store is None:
        review_store = InMemoryReviewStore()
        if app.config['SEED_DEMO_DATA']:
            review_store.load(demo_reviews())

    if identity_provider is None:
        identity_provider = MockIdentityProvider(
            app.config['JWT_SECRET_KEY'],
            expires=app.config['JWT_ACCESS_TOKEN_EXPIRES']
        )

    app.extensions['review_store'] = review_store
    app.extensions['review_queries'] = ReviewQueries(review_store)
    app.extensions['fixture_store'] = fixture_store or FixtureStore()
    app.extensions['identity_provider'] = identity_provider

    # Register Blueprints
    app.register_blueprint(reviews_bp, url_prefix='/api/reviews')
    app.register_blueprint(movies_bp, url_prefix='/api/movies')
    app.register_blueprint(restaurants_bp, url_prefix='/api/restaurants')
    app.register_blueprint(auth_bp, url_prefix='/api/auth')

    register_core_routes(app)
    register_error_handlers(app)
    register_request_logging(app)

    return app


def register_core_routes(app):

    @app.route('/')
    def home():
        """API information"""
        return jsonify({
            'message': 'Welcome to Review Hub',
            'description': 'Share reviews of movies and restaurants',
            'version': VERSION,
            'status': 'running',
            'api_endpoints': {
                'reviews': '/api/reviews',
                'movies': '/api/movies',
                'restaurants': '/api/restaurants',
                'auth': '/api/auth',
                'health': '/api/health'
            }
        })

    # Health Check Endpoint
    @app.route('/api/health')
    def health_check():
        """Application health check endpoint"""
        return jsonify({
            'status': 'healthy',
            'message': 'Server is running!',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'version': VERSION,
            'environment': os.environ.get('FLASK_ENV', 'development'),
            'services': {
                'movies': 'active',
                'restaurants': 'active',
                'reviews': 'active',
                'auth': 'active'
            },
            'reviews': app.extensions['review_queries'].summary()
        })


def register_error_handlers(app):

    @app.errorhandler(400)
    def bad_request(error):
        logger.warning("Bad request", error=str(error))
        return jsonify({
            'error': 'Bad Request',
            'message': 'The request could not be understood by the server',
            'code': 'BAD_REQUEST'
        }), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'error': 'Endpoint not found',
            'code': 'NOT_FOUND',
            'available_endpoints': [
                'GET  /api/health',
                'GET  /api/movies/search?query=term',
                'GET  /api/restaurants/search?location=city&term=food',
                'GET  /api/reviews',
                'POST /api/reviews'
            ]
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'error': 'Method Not Allowed',
            'message': f'{request.method} is not supported on {request.path}',
            'code': 'METHOD_NOT_ALLOWED'
        }), 405

    @app.errorhandler(500)
    def internal_error(error):
        logger.error("Internal server error", error=str(error))
        return jsonify({
            'error': 'Internal Server Error',
            'message': 'An unexpected error occurred',
            'code': 'INTERNAL_ERROR'
        }), 500


# Request/Response Logging
def register_request_logging(app):

    @app.before_request
    def log_request_info():
        if request.endpoint != 'health_check':
            logger.info("Request received",
                        method=request.method,
                        path=request.path,
                        ip=request.remote_addr,
                        user_agent=request.headers.get('User-Agent'))

    @app.after_request
    def log_response_info(response):
        if request.endpoint != 'health_check':
            logger.info("Response sent",
                        method=request.method,
                        path=request.path,
                        status_code=response.status_code,
                        ip=request.remote_addr)
        return response


if __name__ == '__main__':
    # Development server
    host = os.environ.get('HOST', '0.0.0.0')
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('FLASK_ENV') == 'development'

    app = create_app()

    logger.info("Starting Review Hub",
                host=host,
                port=port,
                debug=debug,
                environment=os.environ.get('FLASK_ENV', 'development'))

    app.run(host=host, port=port, debug=debug)
