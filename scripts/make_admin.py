"""Promote a user to admin, creating the account if it does not exist.

Usage: python scripts/make_admin.py USERNAME [PASSWORD]
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from restaurant_app import create_app  # noqa: E402
from restaurant_app.auth.services import make_password_hash  # noqa: E402
from restaurant_app.storage import get_storage  # noqa: E402


def make_admin(username, password=None):
    storage = get_storage()
    user = storage.get_user_by_username(username)

    if user is None:
        if not password:
            raise SystemExit(f'User {username!r} does not exist; pass a password to create it')
        storage.create_user({
            'username': username,
            'password_hash': make_password_hash(password),
            'is_admin': True,
        })
        print('New admin user created')
    else:
        storage.update_user(user.id, {'is_admin': True})
        print('Existing user promoted to admin')


if __name__ == '__main__':
    if len(sys.argv) not in (2, 3):
        raise SystemExit(__doc__)
    app = create_app()
    with app.app_context():
        make_admin(*sys.argv[1:])
