"""
Restaurant Directory - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os
import warnings

from flask import Flask, jsonify
from sqlalchemy import event
from sqlalchemy.exc import SAWarning

from restaurant_app.config import Config
from restaurant_app.errors import register_error_handlers
from restaurant_app.extensions import db, login_manager, server_session
from restaurant_app.storage import init_storage, get_storage

logger = logging.getLogger(__name__)

API_PREFIX = '/api'


def create_app(config_class=Config, storage=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        storage: Storage backend to use instead of the one named by
            STORAGE_BACKEND, e.g. a pre-filled MemStorage in tests

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    with app.app_context():
        _configure_sqlite(app)
    login_manager.init_app(app)
    _configure_sessions(app)
    init_storage(app, storage)
    register_error_handlers(app)

    # Register blueprints
    from restaurant_app.auth import auth_bp
    from restaurant_app.users import users_bp
    from restaurant_app.restaurants import restaurants_bp
    from restaurant_app.menu import menu_bp
    from restaurant_app.reviews import reviews_bp
    from restaurant_app.admin import admin_bp

    app.register_blueprint(auth_bp, url_prefix=API_PREFIX)
    app.register_blueprint(users_bp, url_prefix=f'{API_PREFIX}/users')
    app.register_blueprint(restaurants_bp, url_prefix=f'{API_PREFIX}/restaurants')
    app.register_blueprint(menu_bp, url_prefix=f'{API_PREFIX}/menu-items')
    app.register_blueprint(reviews_bp, url_prefix=f'{API_PREFIX}/reviews')
    app.register_blueprint(admin_bp, url_prefix=f'{API_PREFIX}/admin')

    # User loader for Flask-Login: session holds the id, storage the user
    @login_manager.user_loader
    def load_user(user_id):
        try:
            return get_storage().get_user(int(user_id))
        except ValueError:
            return None

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'message': 'Authentication required'}), 401

    # Create database tables
    with app.app_context():
        db.create_all()
        if app.config.get('SEED_DEFAULT_DATA'):
            _ensure_default_data(app)

    return app


def _configure_logging(app):
    level = app.config.get('LOG_LEVEL', 'INFO')
    if not logging.getLogger().handlers:
        logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger('restaurant_app').setLevel(level)
    app.logger.setLevel(level)


def _configure_sessions(app):
    """Point Flask-Session at its backing store and initialise it."""
    session_type = app.config.get('SESSION_TYPE')
    if session_type == 'sqlalchemy':
        app.config.setdefault('SESSION_SQLALCHEMY', db)
        # Flask-Session declares its session model on the shared metadata
        # for every app; drop the previous app's table so it can redeclare it
        table = app.config.get('SESSION_SQLALCHEMY_TABLE', 'sessions')
        if table in db.metadata.tables:
            db.metadata.remove(db.metadata.tables[table])
    elif session_type == 'cachelib':
        from cachelib import SimpleCache
        # One cache per app, so separate apps never see each other's sessions
        app.config.setdefault('SESSION_CACHELIB', SimpleCache())

    with warnings.catch_warnings():
        # Redeclaring the session model replaces the old class by name
        warnings.filterwarnings('ignore', category=SAWarning,
                                message='This declarative base already contains a class')
        server_session.init_app(app)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


def _configure_sqlite(app):
    """Create the SQLite file directory and turn on foreign key checks."""
    uri = app.config['SQLALCHEMY_DATABASE_URI']
    if not uri.startswith('sqlite'):
        return
    if uri.startswith('sqlite:///') and ':memory:' not in uri:
        os.makedirs(os.path.dirname(uri[len('sqlite:///'):]) or '.', exist_ok=True)
    if not event.contains(db.engine, 'connect', _enable_sqlite_foreign_keys):
        event.listen(db.engine, 'connect', _enable_sqlite_foreign_keys)


def _ensure_default_data(app):
    """Ensure a default admin account and example restaurants exist."""
    from restaurant_app.auth.services import make_password_hash

    storage = get_storage()

    if not storage.get_all_users():
        storage.create_user({
            'username': app.config['ADMIN_USERNAME'],
            'password_hash': make_password_hash(app.config['ADMIN_PASSWORD']),
            'is_admin': True,
        })
        logger.info('Created default admin user %s', app.config['ADMIN_USERNAME'])

    if not storage.get_all_restaurants():
        storage.create_restaurant({
            'name': 'The Italian Place',
            'cuisine': 'Italian',
            'location': '123 Main St, Anytown',
            'phone': '(555) 123-4567',
            'opening_hours': 'Mon-Sat: 11:00 AM - 10:00 PM, Sun: 12:00 PM - 9:00 PM',
            'description': 'Authentic Italian cuisine in a cozy atmosphere.',
            'image_url': '/images/italian.jpg',
        })
        storage.create_restaurant({
            'name': 'Sushi Express',
            'cuisine': 'Japanese',
            'location': '456 Oak Ave, Anytown',
            'phone': '(555) 987-6543',
            'opening_hours': 'Mon-Sun: 11:30 AM - 9:30 PM',
            'description': 'Fresh sushi and Japanese specialties.',
            'image_url': '/images/sushi.jpg',
        })
        logger.info('Created example restaurants')
