"""
Menu Item Routes
"""

from flask import request, jsonify

from restaurant_app.auth.decorators import admin_required
from restaurant_app.errors import NotFoundError, ValidationError
from restaurant_app.menu import menu_bp
from restaurant_app.storage import get_storage, MissingReferenceError
from restaurant_app.validation import parse_payload, MENU_ITEM_FIELDS


def _menu_item_payload(partial=False):
    return parse_payload(request.get_json(silent=True), MENU_ITEM_FIELDS,
                         partial=partial, message='Invalid menu item data')


@menu_bp.route('', methods=['GET'])
def list_menu_items():
    """List all menu items, or one restaurant's with ?restaurantId="""
    storage = get_storage()
    restaurant_id = request.args.get('restaurantId', type=int)
    if restaurant_id is not None:
        items = storage.get_menu_items_by_restaurant(restaurant_id)
    else:
        items = storage.get_all_menu_items()
    return jsonify([item.to_dict() for item in items])


@menu_bp.route('/<int:item_id>', methods=['GET'])
def get_menu_item(item_id):
    item = get_storage().get_menu_item(item_id)
    if item is None:
        raise NotFoundError('Menu item not found')
    return jsonify(item.to_dict())


@menu_bp.route('', methods=['POST'])
@admin_required
def create_menu_item():
    data = _menu_item_payload()
    try:
        item = get_storage().create_menu_item(data)
    except MissingReferenceError:
        raise ValidationError('Referenced restaurant not found')
    return jsonify(item.to_dict()), 201


@menu_bp.route('/<int:item_id>', methods=['PUT'])
@admin_required
def update_menu_item(item_id):
    data = _menu_item_payload(partial=True)
    try:
        item = get_storage().update_menu_item(item_id, data)
    except MissingReferenceError:
        raise ValidationError('Referenced restaurant not found')
    if item is None:
        raise NotFoundError('Menu item not found')
    return jsonify(item.to_dict())


@menu_bp.route('/<int:item_id>', methods=['DELETE'])
@admin_required
def delete_menu_item(item_id):
    if not get_storage().delete_menu_item(item_id):
        raise NotFoundError('Menu item not found')
    return jsonify({'message': 'Menu item deleted successfully'})
