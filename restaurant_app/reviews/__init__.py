"""
Reviews Blueprint

Anyone can read reviews. Writing one requires a login, and only the author
or an admin may change or remove it.
"""

from flask import Blueprint

reviews_bp = Blueprint('reviews', __name__)

from restaurant_app.reviews import routes  # noqa: E402, F401
