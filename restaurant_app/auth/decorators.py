"""
Authorization Guards

Decorators run before a route handler. Missing authentication is answered
with 401, a principal lacking privilege with 403.
"""

from functools import wraps

from flask_login import current_user, login_required

from restaurant_app.errors import AuthenticationError, ForbiddenError
from restaurant_app.storage import get_storage

__all__ = ['login_required', 'admin_required', 'permission_required', 'ensure_owner_or_admin']


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.

    Uses the ``is_admin`` flag of the logged-in user. Role grants do not
    count here, only on routes guarded by ``permission_required``.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            raise AuthenticationError()
        if not current_user.is_admin:
            raise ForbiddenError('Admin privileges required')
        return f(*args, **kwargs)
    return wrapper


def permission_required(action, resource):
    """Decorator factory checking a role grant; admins always pass."""
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if not current_user.is_authenticated:
                raise AuthenticationError()
            if not current_user.is_admin and \
                    not get_storage().user_has_permission(current_user.id, action, resource):
                raise ForbiddenError(f'Missing permission: {action} {resource}')
            return f(*args, **kwargs)
        return wrapper
    return decorator


def ensure_owner_or_admin(review, message):
    """Raise ForbiddenError unless the current user wrote ``review`` or is an admin."""
    if review.user_id != current_user.id and not current_user.is_admin:
        raise ForbiddenError(message)
