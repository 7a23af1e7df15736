"""
Restaurants Blueprint

Public listing of restaurants; changes are restricted to admins.
"""

from flask import Blueprint

restaurants_bp = Blueprint('restaurants', __name__)

from restaurant_app.restaurants import routes  # noqa: E402, F401
