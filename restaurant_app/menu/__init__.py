"""
Menu Items Blueprint
"""

from flask import Blueprint

menu_bp = Blueprint('menu', __name__)

from restaurant_app.menu import routes  # noqa: E402, F401
