"""
Auth Routes

User authentication routes using Flask-Login. The principal id lives in the
server-side session; ``load_user`` in the app factory turns it back into a
user on every request.
"""

import logging

from flask import request, jsonify, session
from flask_login import login_user, logout_user, login_required, current_user

from restaurant_app.auth import auth_bp
from restaurant_app.auth.services import authenticate, make_password_hash
from restaurant_app.errors import ValidationError, AuthenticationError
from restaurant_app.storage import get_storage, DuplicateUsernameError
from restaurant_app.validation import parse_payload, CREDENTIAL_FIELDS

logger = logging.getLogger(__name__)


@auth_bp.route('/register', methods=['POST'])
def register():
    """Create a regular user account and log it in"""
    data = parse_payload(request.get_json(silent=True), CREDENTIAL_FIELDS,
                         message='Invalid registration data')
    storage = get_storage()

    if storage.get_user_by_username(data['username']):
        raise ValidationError('Username already exists')

    try:
        user = storage.create_user({
            'username': data['username'],
            'password_hash': make_password_hash(data['password']),
            'is_admin': False,
        })
    except DuplicateUsernameError:
        raise ValidationError('Username already exists')

    login_user(user)
    logger.info('Registered user %s', user.username)
    return jsonify(user.to_dict()), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """User login route"""
    data = parse_payload(request.get_json(silent=True), CREDENTIAL_FIELDS,
                         message='Invalid login data')
    user = authenticate(get_storage(), data['username'], data['password'])
    if user is None:
        raise AuthenticationError('Invalid username or password')

    login_user(user)
    logger.info('User %s logged in', user.username)
    return jsonify(user.to_dict()), 200


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    """User logout route"""
    username = current_user.username
    logout_user()
    session.clear()
    logger.info('User %s logged out', username)
    return jsonify({'message': 'Logged out successfully'}), 200


@auth_bp.route('/user')
@login_required
def current_user_profile():
    """Return the logged-in user"""
    return jsonify(current_user.to_dict())
