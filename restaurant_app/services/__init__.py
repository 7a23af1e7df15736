"""
Services Package

Exports all services for easy importing.
"""

from restaurant_app.services.passwords import hash_password, verify_password, MalformedHashError

__all__ = [
    'hash_password',
    'verify_password',
    'MalformedHashError',
]
