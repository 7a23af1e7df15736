"""
Flask Extensions

Sessions are stored server-side through Flask-Session; the cookie only
carries the session id. Flask-Login keeps the principal id in that session.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_session import Session

# Database instance
db = SQLAlchemy()

# Login manager for user authentication
login_manager = LoginManager()

# Server-side session store
server_session = Session()
