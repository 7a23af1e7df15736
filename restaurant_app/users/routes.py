"""
User Routes

Account management for admins, plus the current-user lookup every
logged-in client uses.
"""

import logging

from flask import request, jsonify
from flask_login import login_required, current_user

from restaurant_app.auth.decorators import admin_required
from restaurant_app.auth.services import make_password_hash
from restaurant_app.errors import NotFoundError, ValidationError
from restaurant_app.storage import get_storage, DuplicateUsernameError, MissingReferenceError
from restaurant_app.users import users_bp
from restaurant_app.validation import parse_payload, USER_FIELDS

logger = logging.getLogger(__name__)


@users_bp.route('/current-user', methods=['GET'])
@login_required
def get_current_user():
    return jsonify(current_user.to_dict())


@users_bp.route('', methods=['GET'])
@admin_required
def list_users():
    return jsonify([u.to_dict() for u in get_storage().get_all_users()])


@users_bp.route('/<int:user_id>', methods=['GET'])
@admin_required
def get_user(user_id):
    user = get_storage().get_user(user_id)
    if user is None:
        raise NotFoundError('User not found')
    return jsonify(user.to_dict())


@users_bp.route('', methods=['POST'])
@admin_required
def create_user():
    """Create an account; unlike /register this may grant admin or a role."""
    data = parse_payload(request.get_json(silent=True), USER_FIELDS,
                         message='Invalid user data')
    data['password_hash'] = make_password_hash(data.pop('password'))

    try:
        user = get_storage().create_user(data)
    except DuplicateUsernameError:
        raise ValidationError('Username already exists')
    except MissingReferenceError:
        raise ValidationError('Referenced role not found')

    logger.info('Admin %s created user %s', current_user.username, user.username)
    return jsonify(user.to_dict()), 201


@users_bp.route('/<int:user_id>', methods=['PATCH'])
@admin_required
def update_user(user_id):
    """Change a user's admin flag, role, username or password."""
    data = parse_payload(request.get_json(silent=True), USER_FIELDS,
                         partial=True, message='Invalid user data')
    if 'password' in data:
        data['password_hash'] = make_password_hash(data.pop('password'))

    try:
        user = get_storage().update_user(user_id, data)
    except DuplicateUsernameError:
        raise ValidationError('Username already exists')
    except MissingReferenceError:
        raise ValidationError('Referenced role not found')

    if user is None:
        raise NotFoundError('User not found')
    return jsonify(user.to_dict())
