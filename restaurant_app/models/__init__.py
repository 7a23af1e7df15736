"""
Models Package

Exports all models for easy importing.
"""

from restaurant_app.models.user import User, Role, Permission
from restaurant_app.models.restaurant import Restaurant, MenuItem
from restaurant_app.models.review import Review

__all__ = ['User', 'Role', 'Permission', 'Restaurant', 'MenuItem', 'Review']
