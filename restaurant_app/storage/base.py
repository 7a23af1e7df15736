"""
Storage Contract

Data access operations shared by every storage backend. Records are the
model instances from ``restaurant_app.models``; insert and update payloads
are plain dicts keyed by model attribute name (``opening_hours``, not
``openingHours``).

Conventions:
- get-by-id returns the record or None
- update applies only the keys present and returns the record, or None when
  the id is unknown
- delete returns True when a row was removed
"""


class StorageError(Exception):
    """Base class for storage-level failures."""


class DuplicateUsernameError(StorageError):
    def __init__(self, username):
        super().__init__(f'Username already exists: {username}')
        self.username = username


class MissingReferenceError(StorageError):
    def __init__(self, entity, entity_id):
        super().__init__(f'Referenced {entity} not found: {entity_id}')
        self.entity = entity
        self.entity_id = entity_id


class Storage:
    """Abstract storage backend."""

    # User operations
    def get_user(self, user_id):
        raise NotImplementedError

    def get_user_by_username(self, username):
        raise NotImplementedError

    def get_all_users(self):
        raise NotImplementedError

    def create_user(self, data):
        raise NotImplementedError

    def update_user(self, user_id, data):
        raise NotImplementedError

    # Restaurant operations
    def get_all_restaurants(self):
        raise NotImplementedError

    def get_restaurant(self, restaurant_id):
        raise NotImplementedError

    def create_restaurant(self, data):
        raise NotImplementedError

    def update_restaurant(self, restaurant_id, data):
        raise NotImplementedError

    def delete_restaurant(self, restaurant_id):
        raise NotImplementedError

    # Menu item operations
    def get_all_menu_items(self):
        raise NotImplementedError

    def get_menu_items_by_restaurant(self, restaurant_id):
        raise NotImplementedError

    def get_menu_item(self, item_id):
        raise NotImplementedError

    def create_menu_item(self, data):
        raise NotImplementedError

    def update_menu_item(self, item_id, data):
        raise NotImplementedError

    def delete_menu_item(self, item_id):
        raise NotImplementedError

    # Review operations
    def get_all_reviews(self):
        raise NotImplementedError

    def get_reviews_by_restaurant(self, restaurant_id):
        raise NotImplementedError

    def get_reviews_by_user(self, user_id):
        raise NotImplementedError

    def get_review(self, review_id):
        raise NotImplementedError

    def create_review(self, data):
        raise NotImplementedError

    def update_review(self, review_id, data):
        raise NotImplementedError

    def delete_review(self, review_id):
        raise NotImplementedError

    # Roles and permissions (experimental)
    def get_all_roles(self):
        raise NotImplementedError

    def create_role(self, name, description=None):
        raise NotImplementedError

    def grant_permission(self, role_id, action, resource):
        raise NotImplementedError

    def user_has_permission(self, user_id, action, resource):
        raise NotImplementedError

    def count_summary(self):
        """Return row counts keyed by entity name."""
        return {
            'users': len(self.get_all_users()),
            'restaurants': len(self.get_all_restaurants()),
            'menuItems': len(self.get_all_menu_items()),
            'reviews': len(self.get_all_reviews()),
        }
