"""
In-Memory Storage

Keeps records in dicts on the storage object itself. Each application gets
its own instance, so tests and development servers never share state.
Records are transient model instances, the same types DatabaseStorage
returns, so callers cannot tell the backends apart.
"""

import itertools
import logging

from restaurant_app.models import User, Role, Permission, Restaurant, MenuItem, Review
from restaurant_app.models.review import utcnow
from restaurant_app.storage.base import Storage, DuplicateUsernameError, MissingReferenceError

logger = logging.getLogger(__name__)

_ENTITIES = ('users', 'roles', 'permissions', 'restaurants', 'menu_items', 'reviews')


class MemStorage(Storage):
    """Storage held entirely in process memory."""

    def __init__(self):
        self._tables = {name: {} for name in _ENTITIES}
        self._ids = {name: itertools.count(1) for name in _ENTITIES}

    def _insert(self, table, record):
        record.id = next(self._ids[table])
        self._tables[table][record.id] = record
        return record

    def _rows(self, table, **filters):
        rows = self._tables[table].values()
        if filters:
            rows = [r for r in rows
                    if all(getattr(r, key) == value for key, value in filters.items())]
        return sorted(rows, key=lambda r: r.id)

    def _update(self, table, record_id, data):
        record = self._tables[table].get(record_id)
        if record is None:
            return None
        for key, value in data.items():
            setattr(record, key, value)
        return record

    def _delete(self, table, record_id):
        return self._tables[table].pop(record_id, None) is not None

    def _require(self, table, record_id, entity):
        if record_id not in self._tables[table]:
            raise MissingReferenceError(entity, record_id)

    # User operations
    def get_user(self, user_id):
        return self._tables['users'].get(user_id)

    def get_user_by_username(self, username):
        for user in self._tables['users'].values():
            if user.username == username:
                return user
        return None

    def get_all_users(self):
        return self._rows('users')

    def create_user(self, data):
        if self.get_user_by_username(data.get('username')) is not None:
            raise DuplicateUsernameError(data.get('username'))
        if data.get('role_id') is not None:
            self._require('roles', data['role_id'], 'role')
        user = User(is_admin=False, role_id=None)
        for key, value in data.items():
            setattr(user, key, value)
        user = self._insert('users', user)
        logger.info('Created user %s (id=%s)', user.username, user.id)
        return user

    def update_user(self, user_id, data):
        if 'username' in data:
            existing = self.get_user_by_username(data['username'])
            if existing is not None and existing.id != user_id:
                raise DuplicateUsernameError(data['username'])
        if data.get('role_id') is not None:
            self._require('roles', data['role_id'], 'role')
        return self._update('users', user_id, data)

    # Restaurant operations
    def get_all_restaurants(self):
        return self._rows('restaurants')

    def get_restaurant(self, restaurant_id):
        return self._tables['restaurants'].get(restaurant_id)

    def create_restaurant(self, data):
        restaurant = Restaurant(description=None, image_url=None)
        for key, value in data.items():
            setattr(restaurant, key, value)
        restaurant = self._insert('restaurants', restaurant)
        logger.info('Created restaurant %r (id=%s)', restaurant.name, restaurant.id)
        return restaurant

    def update_restaurant(self, restaurant_id, data):
        return self._update('restaurants', restaurant_id, data)

    def delete_restaurant(self, restaurant_id):
        if not self._delete('restaurants', restaurant_id):
            return False
        for item in self._rows('menu_items', restaurant_id=restaurant_id):
            self._delete('menu_items', item.id)
        for review in self._rows('reviews', restaurant_id=restaurant_id):
            self._delete('reviews', review.id)
        logger.info('Deleted restaurant id=%s', restaurant_id)
        return True

    # Menu item operations
    def get_all_menu_items(self):
        return self._rows('menu_items')

    def get_menu_items_by_restaurant(self, restaurant_id):
        return self._rows('menu_items', restaurant_id=restaurant_id)

    def get_menu_item(self, item_id):
        return self._tables['menu_items'].get(item_id)

    def create_menu_item(self, data):
        self._require('restaurants', data.get('restaurant_id'), 'restaurant')
        item = MenuItem(description=None, image_url=None)
        for key, value in data.items():
            setattr(item, key, value)
        item = self._insert('menu_items', item)
        logger.info('Created menu item %r for restaurant id=%s', item.name, item.restaurant_id)
        return item

    def update_menu_item(self, item_id, data):
        if 'restaurant_id' in data:
            self._require('restaurants', data['restaurant_id'], 'restaurant')
        return self._update('menu_items', item_id, data)

    def delete_menu_item(self, item_id):
        return self._delete('menu_items', item_id)

    # Review operations
    def get_all_reviews(self):
        return self._rows('reviews')

    def get_reviews_by_restaurant(self, restaurant_id):
        return self._rows('reviews', restaurant_id=restaurant_id)

    def get_reviews_by_user(self, user_id):
        return self._rows('reviews', user_id=user_id)

    def get_review(self, review_id):
        return self._tables['reviews'].get(review_id)

    def create_review(self, data):
        self._require('restaurants', data.get('restaurant_id'), 'restaurant')
        self._require('users', data.get('user_id'), 'user')
        review = Review(created_at=utcnow())
        for key, value in data.items():
            setattr(review, key, value)
        review = self._insert('reviews', review)
        logger.info('Created review id=%s for restaurant id=%s', review.id, review.restaurant_id)
        return review

    def update_review(self, review_id, data):
        return self._update('reviews', review_id, data)

    def delete_review(self, review_id):
        return self._delete('reviews', review_id)

    # Roles and permissions
    def get_all_roles(self):
        return self._rows('roles')

    def create_role(self, name, description=None):
        return self._insert('roles', Role(name=name, description=description))

    def grant_permission(self, role_id, action, resource):
        self._require('roles', role_id, 'role')
        for grant in self._rows('permissions', role_id=role_id):
            if grant.action == action and grant.resource == resource:
                return grant
        return self._insert('permissions',
                            Permission(role_id=role_id, action=action, resource=resource))

    def user_has_permission(self, user_id, action, resource):
        user = self.get_user(user_id)
        if user is None or user.role_id is None:
            return False
        return any(grant.action == action and grant.resource == resource
                   for grant in self._rows('permissions', role_id=user.role_id))
