"""
Restaurant Routes
"""

from flask import request, jsonify

from restaurant_app.auth.decorators import admin_required
from restaurant_app.errors import NotFoundError
from restaurant_app.restaurants import restaurants_bp
from restaurant_app.storage import get_storage
from restaurant_app.validation import parse_payload, RESTAURANT_FIELDS


def _restaurant_payload(partial=False):
    return parse_payload(request.get_json(silent=True), RESTAURANT_FIELDS,
                         partial=partial, message='Invalid restaurant data')


@restaurants_bp.route('', methods=['GET'])
def list_restaurants():
    restaurants = get_storage().get_all_restaurants()
    return jsonify([r.to_dict() for r in restaurants])


@restaurants_bp.route('/<int:restaurant_id>', methods=['GET'])
def get_restaurant(restaurant_id):
    restaurant = get_storage().get_restaurant(restaurant_id)
    if restaurant is None:
        raise NotFoundError('Restaurant not found')
    return jsonify(restaurant.to_dict())


@restaurants_bp.route('', methods=['POST'])
@admin_required
def create_restaurant():
    """Add a restaurant to the directory."""
    restaurant = get_storage().create_restaurant(_restaurant_payload())
    return jsonify(restaurant.to_dict()), 201


@restaurants_bp.route('/<int:restaurant_id>', methods=['PUT'])
@admin_required
def update_restaurant(restaurant_id):
    """Partially update a restaurant; only the submitted fields change."""
    restaurant = get_storage().update_restaurant(restaurant_id, _restaurant_payload(partial=True))
    if restaurant is None:
        raise NotFoundError('Restaurant not found')
    return jsonify(restaurant.to_dict())


@restaurants_bp.route('/<int:restaurant_id>', methods=['DELETE'])
@admin_required
def delete_restaurant(restaurant_id):
    """Delete a restaurant together with its menu items and reviews."""
    if not get_storage().delete_restaurant(restaurant_id):
        raise NotFoundError('Restaurant not found')
    return jsonify({'message': 'Restaurant deleted successfully'})
