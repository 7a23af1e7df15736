from restaurant_app.storage import get_storage

from conftest import login


def test_register_logs_user_in(client):
    r = client.post('/api/register', json={'username': 'newbie', 'password': 'pw123'})
    assert r.status_code == 201
    body = r.get_json()
    assert body['username'] == 'newbie'
    assert body['isAdmin'] is False
    assert 'password' not in body and 'password_hash' not in body

    r = client.get('/api/users/current-user')
    assert r.status_code == 200
    assert r.get_json()['id'] == body['id']


def test_register_cannot_grant_admin(client):
    r = client.post('/api/register', json={'username': 'sneaky', 'password': 'pw', 'isAdmin': True})
    assert r.status_code == 201
    assert r.get_json()['isAdmin'] is False


def test_register_duplicate_username(client, create_user):
    create_user('taken')
    r = client.post('/api/register', json={'username': 'taken', 'password': 'pw'})
    assert r.status_code == 400
    assert r.get_json()['message'] == 'Username already exists'


def test_register_requires_fields(client):
    r = client.post('/api/register', json={'username': 'x'})
    assert r.status_code == 400
    assert r.get_json()['errors'][0]['field'] == 'password'


def test_register_stores_hashed_password(app, client):
    client.post('/api/register', json={'username': 'hashme', 'password': 'plain-text'})
    with app.app_context():
        user = get_storage().get_user_by_username('hashme')
        assert user.password_hash != 'plain-text'
        assert user.password_hash.startswith('scrypt:')


def test_login_success_and_current_user(client, create_user):
    create_user('alice', 'alicepass')
    r = login(client, 'alice', 'alicepass')
    assert r.status_code == 200
    assert r.get_json()['username'] == 'alice'

    r = client.get('/api/user')
    assert r.status_code == 200
    assert r.get_json()['username'] == 'alice'


def test_login_wrong_password(client, create_user):
    create_user('alice', 'alicepass')
    r = login(client, 'alice', 'nope')
    assert r.status_code == 401
    assert r.get_json()['message'] == 'Invalid username or password'
    assert client.get('/api/users/current-user').status_code == 401


def test_login_unknown_user(client):
    assert login(client, 'ghost', 'boo').status_code == 401


def test_login_requires_json_body(client):
    r = client.post('/api/login', data='username=alice')
    assert r.status_code == 400


def test_logout_ends_session(client, create_user):
    create_user('alice', 'alicepass')
    login(client, 'alice', 'alicepass')

    r = client.post('/api/logout')
    assert r.status_code == 200
    assert r.get_json()['message'] == 'Logged out successfully'
    assert client.get('/api/users/current-user').status_code == 401
    assert client.post('/api/logout').status_code == 401


def test_anonymous_current_user_is_401(client):
    r = client.get('/api/users/current-user')
    assert r.status_code == 401
    assert r.get_json() == {'message': 'Authentication required'}


def test_sessions_are_per_client(app, create_user):
    create_user('alice', 'alicepass')
    first = app.test_client()
    second = app.test_client()
    login(first, 'alice', 'alicepass')
    assert first.get('/api/user').status_code == 200
    assert second.get('/api/user').status_code == 401


def test_malformed_stored_hash_is_server_error(app, client):
    with app.app_context():
        get_storage().create_user({'username': 'broken', 'password_hash': 'garbage', 'is_admin': False})
    r = login(client, 'broken', 'whatever')
    assert r.status_code == 500
    assert r.get_json() == {'message': 'Server error'}


def test_username_whitespace_is_ignored(app, client):
    r = client.post('/api/register', json={'username': '  bob ', 'password': 'bobpass'})
    assert r.status_code == 201
    assert r.get_json()['username'] == 'bob'

    r = app.test_client().post('/api/register', json={'username': 'bob', 'password': 'other'})
    assert r.status_code == 400
    assert r.get_json()['message'] == 'Username already exists'

    assert login(app.test_client(), 'bob ', 'bobpass').status_code == 200


def test_blank_username_rejected(client):
    r = client.post('/api/register', json={'username': '   ', 'password': 'pw'})
    assert r.status_code == 400
    assert r.get_json()['errors'][0]['field'] == 'username'
