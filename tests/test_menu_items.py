import pytest

from conftest import RESTAURANT


def menu_item(restaurant_id, **overrides):
    data = {
        'restaurantId': restaurant_id,
        'name': 'Margherita',
        'description': 'Tomato, mozzarella, basil',
        'price': '11.50',
        'category': 'Pizza',
        'imageUrl': None,
    }
    data.update(overrides)
    return data


def test_create_and_fetch(admin_client, client, restaurant_id):
    payload = menu_item(restaurant_id)
    r = admin_client.post('/api/menu-items', json=payload)
    assert r.status_code == 201
    item_id = r.get_json()['id']

    fetched = client.get(f'/api/menu-items/{item_id}').get_json()
    for key, value in payload.items():
        assert fetched[key] == value


def test_filter_by_restaurant(admin_client, client, restaurant_id):
    other_id = admin_client.post('/api/restaurants', json=dict(RESTAURANT, name='Other')).get_json()['id']
    admin_client.post('/api/menu-items', json=menu_item(restaurant_id, name='A'))
    admin_client.post('/api/menu-items', json=menu_item(restaurant_id, name='B'))
    admin_client.post('/api/menu-items', json=menu_item(other_id, name='C'))

    names = [i['name'] for i in client.get(f'/api/menu-items?restaurantId={restaurant_id}').get_json()]
    assert names == ['A', 'B']
    assert len(client.get('/api/menu-items').get_json()) == 3


def test_missing_restaurant_rejected(admin_client, client):
    r = admin_client.post('/api/menu-items', json=menu_item(404))
    assert r.status_code == 400
    assert r.get_json()['message'] == 'Referenced restaurant not found'
    assert client.get('/api/menu-items').get_json() == []


def test_update_to_missing_restaurant_rejected(admin_client, restaurant_id):
    item_id = admin_client.post('/api/menu-items', json=menu_item(restaurant_id)).get_json()['id']
    r = admin_client.put(f'/api/menu-items/{item_id}', json={'restaurantId': 404})
    assert r.status_code == 400


def test_partial_update(admin_client, restaurant_id):
    item_id = admin_client.post('/api/menu-items', json=menu_item(restaurant_id)).get_json()['id']
    r = admin_client.put(f'/api/menu-items/{item_id}', json={'price': '12.00'})
    assert r.status_code == 200
    assert r.get_json()['price'] == '12.00'
    assert r.get_json()['name'] == 'Margherita'


def test_invalid_body(admin_client, restaurant_id):
    r = admin_client.post('/api/menu-items', json={'restaurantId': restaurant_id, 'price': 11.5})
    assert r.status_code == 400
    fields = {e['field'] for e in r.get_json()['errors']}
    assert fields == {'name', 'price', 'category'}


@pytest.mark.parametrize('method, path', [
    ('post', '/api/menu-items'),
    ('put', '/api/menu-items/{id}'),
    ('delete', '/api/menu-items/{id}'),
])
def test_guarded_mutations(app, admin_client, user_client, restaurant_id, method, path):
    item_id = admin_client.post('/api/menu-items', json=menu_item(restaurant_id)).get_json()['id']
    url = path.format(id=item_id)
    body = menu_item(restaurant_id, name='Changed')

    assert getattr(app.test_client(), method)(url, json=body).status_code == 401
    assert getattr(user_client, method)(url, json=body).status_code == 403
    items = admin_client.get('/api/menu-items').get_json()
    assert [i['name'] for i in items] == ['Margherita']


def test_delete(admin_client, client, restaurant_id):
    item_id = admin_client.post('/api/menu-items', json=menu_item(restaurant_id)).get_json()['id']
    r = admin_client.delete(f'/api/menu-items/{item_id}')
    assert r.status_code == 200
    assert client.get(f'/api/menu-items/{item_id}').status_code == 404
    assert admin_client.delete(f'/api/menu-items/{item_id}').status_code == 404
