"""
Auth Blueprint

Registration, login, logout and the current-user lookup.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from restaurant_app.auth import routes  # noqa: E402, F401
