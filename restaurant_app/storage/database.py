"""
Database Storage

SQLAlchemy-backed implementation of the storage contract. Must be used
inside an application context.
"""

import logging

from sqlalchemy.exc import IntegrityError

from restaurant_app.extensions import db
from restaurant_app.models import User, Role, Permission, Restaurant, MenuItem, Review
from restaurant_app.storage.base import Storage, DuplicateUsernameError, MissingReferenceError

logger = logging.getLogger(__name__)


class DatabaseStorage(Storage):
    """Storage backed by the relational database configured on ``db``."""

    def __init__(self, database=db):
        self.db = database

    def _commit(self):
        try:
            self.db.session.commit()
        except Exception:
            self.db.session.rollback()
            raise

    def _insert(self, record):
        self.db.session.add(record)
        self._commit()
        return record

    def _update(self, model, record_id, data):
        record = self.db.session.get(model, record_id)
        if record is None:
            return None
        for key, value in data.items():
            setattr(record, key, value)
        self._commit()
        return record

    def _delete(self, model, record_id):
        record = self.db.session.get(model, record_id)
        if record is None:
            return False
        self.db.session.delete(record)
        self._commit()
        return True

    def _require(self, model, record_id, entity):
        if record_id is None or self.db.session.get(model, record_id) is None:
            raise MissingReferenceError(entity, record_id)

    # User operations
    def get_user(self, user_id):
        return self.db.session.get(User, user_id)

    def get_user_by_username(self, username):
        return User.query.filter_by(username=username).first()

    def get_all_users(self):
        return User.query.order_by(User.id).all()

    def create_user(self, data):
        if data.get('role_id') is not None:
            self._require(Role, data['role_id'], 'role')
        user = User(**data)
        self.db.session.add(user)
        try:
            self.db.session.commit()
        except IntegrityError:
            self.db.session.rollback()
            raise DuplicateUsernameError(data.get('username'))
        logger.info('Created user %s (id=%s)', user.username, user.id)
        return user

    def update_user(self, user_id, data):
        if 'role_id' in data and data['role_id'] is not None:
            self._require(Role, data['role_id'], 'role')
        try:
            return self._update(User, user_id, data)
        except IntegrityError:
            raise DuplicateUsernameError(data.get('username'))

    # Restaurant operations
    def get_all_restaurants(self):
        return Restaurant.query.order_by(Restaurant.id).all()

    def get_restaurant(self, restaurant_id):
        return self.db.session.get(Restaurant, restaurant_id)

    def create_restaurant(self, data):
        restaurant = self._insert(Restaurant(**data))
        logger.info('Created restaurant %r (id=%s)', restaurant.name, restaurant.id)
        return restaurant

    def update_restaurant(self, restaurant_id, data):
        return self._update(Restaurant, restaurant_id, data)

    def delete_restaurant(self, restaurant_id):
        # Menu items and reviews go with it through the relationship cascade
        deleted = self._delete(Restaurant, restaurant_id)
        if deleted:
            logger.info('Deleted restaurant id=%s', restaurant_id)
        return deleted

    # Menu item operations
    def get_all_menu_items(self):
        return MenuItem.query.order_by(MenuItem.id).all()

    def get_menu_items_by_restaurant(self, restaurant_id):
        return MenuItem.query.filter_by(restaurant_id=restaurant_id).order_by(MenuItem.id).all()

    def get_menu_item(self, item_id):
        return self.db.session.get(MenuItem, item_id)

    def create_menu_item(self, data):
        self._require(Restaurant, data.get('restaurant_id'), 'restaurant')
        item = self._insert(MenuItem(**data))
        logger.info('Created menu item %r for restaurant id=%s', item.name, item.restaurant_id)
        return item

    def update_menu_item(self, item_id, data):
        if 'restaurant_id' in data:
            self._require(Restaurant, data['restaurant_id'], 'restaurant')
        return self._update(MenuItem, item_id, data)

    def delete_menu_item(self, item_id):
        return self._delete(MenuItem, item_id)

    # Review operations
    def get_all_reviews(self):
        return Review.query.order_by(Review.id).all()

    def get_reviews_by_restaurant(self, restaurant_id):
        return Review.query.filter_by(restaurant_id=restaurant_id).order_by(Review.id).all()

    def get_reviews_by_user(self, user_id):
        return Review.query.filter_by(user_id=user_id).order_by(Review.id).all()

    def get_review(self, review_id):
        return self.db.session.get(Review, review_id)

    def create_review(self, data):
        self._require(Restaurant, data.get('restaurant_id'), 'restaurant')
        self._require(User, data.get('user_id'), 'user')
        review = self._insert(Review(**data))
        logger.info('Created review id=%s for restaurant id=%s', review.id, review.restaurant_id)
        return review

    def update_review(self, review_id, data):
        return self._update(Review, review_id, data)

    def delete_review(self, review_id):
        return self._delete(Review, review_id)

    # Roles and permissions
    def get_all_roles(self):
        return Role.query.order_by(Role.id).all()

    def create_role(self, name, description=None):
        return self._insert(Role(name=name, description=description))

    def grant_permission(self, role_id, action, resource):
        self._require(Role, role_id, 'role')
        existing = Permission.query.filter_by(role_id=role_id, action=action,
                                              resource=resource).first()
        if existing:
            return existing
        return self._insert(Permission(role_id=role_id, action=action, resource=resource))

    def user_has_permission(self, user_id, action, resource):
        user = self.get_user(user_id)
        if user is None or user.role_id is None:
            return False
        grant = Permission.query.filter_by(role_id=user.role_id, action=action,
                                           resource=resource).first()
        return grant is not None

    def count_summary(self):
        return {
            'users': User.query.count(),
            'restaurants': Restaurant.query.count(),
            'menuItems': MenuItem.query.count(),
            'reviews': Review.query.count(),
        }
