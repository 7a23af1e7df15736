"""
Review Routes
"""

import logging

from flask import request, jsonify
from flask_login import login_required, current_user

from restaurant_app.auth.decorators import ensure_owner_or_admin
from restaurant_app.errors import NotFoundError, ValidationError, ForbiddenError
from restaurant_app.reviews import reviews_bp
from restaurant_app.storage import get_storage, MissingReferenceError
from restaurant_app.validation import parse_payload, REVIEW_FIELDS

logger = logging.getLogger(__name__)


def _get_review_or_404(review_id):
    review = get_storage().get_review(review_id)
    if review is None:
        raise NotFoundError('Review not found')
    return review


@reviews_bp.route('', methods=['GET'])
def list_reviews():
    """List reviews, filtered by ?restaurantId= or ?userId= when given"""
    storage = get_storage()
    restaurant_id = request.args.get('restaurantId', type=int)
    user_id = request.args.get('userId', type=int)

    if restaurant_id is not None:
        reviews = storage.get_reviews_by_restaurant(restaurant_id)
    elif user_id is not None:
        reviews = storage.get_reviews_by_user(user_id)
    else:
        reviews = storage.get_all_reviews()
    return jsonify([r.to_dict() for r in reviews])


@reviews_bp.route('/<int:review_id>', methods=['GET'])
def get_review(review_id):
    return jsonify(_get_review_or_404(review_id).to_dict())


@reviews_bp.route('', methods=['POST'])
@login_required
def create_review():
    """Post a review as the logged-in user."""
    data = parse_payload(request.get_json(silent=True), REVIEW_FIELDS,
                         message='Invalid review data')
    if data.get('user_id', current_user.id) != current_user.id:
        raise ForbiddenError('You can only post reviews as yourself')
    data['user_id'] = current_user.id

    try:
        review = get_storage().create_review(data)
    except MissingReferenceError:
        raise ValidationError('Referenced restaurant not found')
    return jsonify(review.to_dict()), 201


@reviews_bp.route('/<int:review_id>', methods=['PATCH'])
@login_required
def update_review(review_id):
    """Change rating or content. The restaurant and author are fixed."""
    review = _get_review_or_404(review_id)
    ensure_owner_or_admin(review, 'You can only update your own reviews')

    data = parse_payload(request.get_json(silent=True), REVIEW_FIELDS,
                         partial=True, message='Invalid review data')
    data.pop('restaurant_id', None)
    data.pop('user_id', None)

    updated = get_storage().update_review(review_id, data)
    if updated is None:
        raise NotFoundError('Review not found')
    return jsonify(updated.to_dict())


@reviews_bp.route('/<int:review_id>', methods=['DELETE'])
@login_required
def delete_review(review_id):
    review = _get_review_or_404(review_id)
    ensure_owner_or_admin(review, 'You can only delete your own reviews')

    if not get_storage().delete_review(review_id):
        raise NotFoundError('Review not found')
    logger.info('User %s deleted review id=%s', current_user.username, review_id)
    return jsonify({'message': 'Review deleted successfully'})
