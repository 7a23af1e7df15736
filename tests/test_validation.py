import pytest

from restaurant_app.errors import ValidationError
from restaurant_app.validation import (
    parse_payload, RESTAURANT_FIELDS, MENU_ITEM_FIELDS, REVIEW_FIELDS, CREDENTIAL_FIELDS,
)


def test_maps_camel_case_to_attributes_and_drops_unknown_keys():
    data = parse_payload({
        'name': 'Diner', 'cuisine': 'American', 'location': 'Main St', 'phone': '1',
        'openingHours': '24/7', 'imageUrl': None, 'id': 99, 'rogue': True,
    }, RESTAURANT_FIELDS)
    assert data == {
        'name': 'Diner', 'cuisine': 'American', 'location': 'Main St', 'phone': '1',
        'opening_hours': '24/7', 'image_url': None,
    }


def test_reports_every_missing_field():
    with pytest.raises(ValidationError) as exc:
        parse_payload({'name': 'Diner'}, RESTAURANT_FIELDS, message='Invalid restaurant data')
    assert exc.value.message == 'Invalid restaurant data'
    fields = sorted(e['field'] for e in exc.value.errors)
    assert fields == ['cuisine', 'location', 'openingHours', 'phone']


def test_partial_allows_missing_but_still_checks_types():
    assert parse_payload({'price': '9.99'}, MENU_ITEM_FIELDS, partial=True) == {'price': '9.99'}
    with pytest.raises(ValidationError):
        parse_payload({'name': ''}, MENU_ITEM_FIELDS, partial=True)


@pytest.mark.parametrize('body', [None, [], 'text', 3])
def test_non_object_body_rejected(body):
    with pytest.raises(ValidationError):
        parse_payload(body, RESTAURANT_FIELDS)


@pytest.mark.parametrize('restaurant_id', ['1', 1.5, True, None])
def test_restaurant_id_must_be_integer(restaurant_id):
    body = {'restaurantId': restaurant_id, 'name': 'Soup', 'price': '4', 'category': 'Starters'}
    with pytest.raises(ValidationError):
        parse_payload(body, MENU_ITEM_FIELDS)


@pytest.mark.parametrize('rating', [1, 2, 3, 4, 5])
def test_rating_in_range_accepted(rating):
    data = parse_payload({'restaurantId': 1, 'rating': rating, 'content': 'ok'}, REVIEW_FIELDS)
    assert data['rating'] == rating


@pytest.mark.parametrize('rating', [0, 6, -1, 100, 2.5, '3', True, None])
def test_rating_out_of_range_or_wrong_type_rejected(rating):
    with pytest.raises(ValidationError) as exc:
        parse_payload({'restaurantId': 1, 'rating': rating, 'content': 'ok'}, REVIEW_FIELDS)
    assert exc.value.errors[0]['field'] == 'rating'


def test_credentials_strip_username_but_not_password():
    data = parse_payload({'username': ' chef\t', 'password': ' secret '}, CREDENTIAL_FIELDS)
    assert data == {'username': 'chef', 'password': ' secret '}
