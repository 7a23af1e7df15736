"""
Admin Blueprint

Back-office summary and role management. Access goes through the same
Flask-Login principal as the rest of the API.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from restaurant_app.admin import routes  # noqa: E402, F401
