"""
Auth Services

Credential checks shared by the login route and scripts.
"""

import logging

from flask import current_app

from restaurant_app.services.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


def authenticate(storage, username, password):
    """Return the user for a valid username/password pair, else None."""
    user = storage.get_user_by_username(username)
    if user is None:
        logger.warning('Login failed: unknown user %r', username)
        return None
    if not verify_password(password, user.password_hash):
        logger.warning('Login failed: bad password for %r', username)
        return None
    return user


def make_password_hash(password):
    """Hash a password with the method configured on the current app."""
    return hash_password(password, method=current_app.config['PASSWORD_HASH_METHOD'])
