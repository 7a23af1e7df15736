"""
Configuration settings for the Restaurant Directory API
"""
import os
from datetime import timedelta


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'insecure-dev-secret-change-in-production'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'restaurants.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Data access backend: 'database' (SQLAlchemy) or 'memory'
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND') or 'database'

    # Server-side sessions (Flask-Session): 'sqlalchemy' or 'cachelib'
    SESSION_TYPE = os.environ.get('SESSION_TYPE') or 'sqlalchemy'
    SESSION_PERMANENT = True
    PERMANENT_SESSION_LIFETIME = timedelta(days=1)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE', False)

    # Password hashing (werkzeug method string)
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'scrypt'

    # Default admin account and example restaurants created on first start
    SEED_DEFAULT_DATA = _env_flag('SEED_DEFAULT_DATA', True)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    STORAGE_BACKEND = 'database'
    SESSION_TYPE = 'cachelib'
    SESSION_COOKIE_SECURE = False
    SEED_DEFAULT_DATA = False
    # Cheaper scrypt cost keeps the suite fast
    PASSWORD_HASH_METHOD = 'scrypt:1024:8:1'
    LOG_LEVEL = 'DEBUG'
