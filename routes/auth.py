"""
Authentication Routes for Review Hub
Mock identity endpoints; every credential is accepted
"""

import structlog
from flask import Blueprint, current_app, jsonify, request
from marshmallow import ValidationError

from schemas import LoginSchema, RegisterSchema, VerifySchema

# Initialize logger
logger = structlog.get_logger(__name__)

# Create Blueprint
auth_bp = Blueprint('auth', __name__)


def get_provider():
    return current_app.extensions['identity_provider']


def identity_response(identity):
    """Identity payload plus a freshly issued token"""
    data = identity.to_dict()
    data['token'] = get_provider().issue_token(identity)
    return jsonify(data)


@auth_bp.route('/verify', methods=['POST'])
def verify():
    """Resolve a client token into a user identity"""
    try:
        data = VerifySchema().load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({
            'error': 'Validation failed',
            'code': 'VALIDATION_ERROR',
            'details': err.messages
        }), 400

    try:
        identity = get_provider().verify(data['token'])
    except Exception as e:
        logger.error("Token verification failed", error=str(e))
        return jsonify({
            'error': 'Failed to verify token',
            'code': 'TOKEN_VERIFICATION_ERROR'
        }), 500

    return jsonify(identity.to_dict())


@auth_bp.route('/login', methods=['POST'])
def login():
    """Authenticate user and return a token"""
    schema = LoginSchema()

    try:
        data = schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        logger.warning("Login validation failed", errors=err.messages)
        return jsonify({
            'error': 'Validation failed',
            'code': 'VALIDATION_ERROR',
            'details': err.messages
        }), 400

    try:
        identity = get_provider().login(data['email'], data['password'])
        return identity_response(identity)
    except Exception as e:
        logger.error("Login failed", error=str(e))
        return jsonify({
            'error': 'Login failed',
            'code': 'LOGIN_ERROR'
        }), 500


@auth_bp.route('/register', methods=['POST'])
def register():
    """Register a new user and return a token"""
    schema = RegisterSchema()

    try:
        data = schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        logger.warning("Registration validation failed", errors=err.messages)
        return jsonify({
            'error': 'Validation failed',
            'code': 'VALIDATION_ERROR',
            'details': err.messages
        }), 400

    try:
        identity = get_provider().register(data['email'], data['password'], name=data['name'])
        return identity_response(identity)
    except Exception as e:
        logger.error("Registration failed", error=str(e))
        return jsonify({
            'error': 'Registration failed',
            'code': 'REGISTRATION_ERROR'
        }), 500
