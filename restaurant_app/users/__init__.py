"""
Users Blueprint
"""

from flask import Blueprint

users_bp = Blueprint('users', __name__)

from restaurant_app.users import routes  # noqa: E402, F401
