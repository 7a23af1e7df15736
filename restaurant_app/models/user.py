"""
User, Role and Permission Models
"""

from flask_login import UserMixin
from sqlalchemy import Boolean
from restaurant_app.extensions import db


class User(UserMixin, db.Model):
    """User model for authentication"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    # Role-based access control flag
    is_admin = db.Column(Boolean, default=False, nullable=False)
    # Experimental role assignment, see Permission
    role_id = db.Column(db.Integer, db.ForeignKey('roles.id', ondelete='SET NULL'))

    reviews = db.relationship('Review', backref='author', lazy=True,
                              cascade='all, delete')

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'isAdmin': bool(self.is_admin),
            'roleId': self.role_id,
        }

    def __repr__(self):
        return f'<User {self.username}>'


class Role(db.Model):
    """Named group of permissions that can be attached to users"""
    __tablename__ = 'roles'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), unique=True, nullable=False)
    description = db.Column(db.String(255))

    permissions = db.relationship('Permission', backref='role', lazy=True,
                                  cascade='all, delete')

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'description': self.description}

    def __repr__(self):
        return f'<Role {self.name}>'


class Permission(db.Model):
    """A single (action, resource) grant, e.g. ('read', 'dashboard')"""
    __tablename__ = 'permissions'
    __table_args__ = (
        db.UniqueConstraint('role_id', 'action', 'resource', name='uq_permission_grant'),
    )

    id = db.Column(db.Integer, primary_key=True)
    role_id = db.Column(db.Integer, db.ForeignKey('roles.id', ondelete='CASCADE'),
                        nullable=False, index=True)
    action = db.Column(db.String(50), nullable=False)
    resource = db.Column(db.String(50), nullable=False)

    def __repr__(self):
        return f'<Permission {self.action}:{self.resource} Role:{self.role_id}>'
