import pytest

from restaurant_app import create_app
from restaurant_app.auth.services import make_password_hash
from restaurant_app.config import TestConfig
from restaurant_app.storage import MemStorage, get_storage


RESTAURANT = {
    'name': 'The Italian Place',
    'cuisine': 'Italian',
    'location': '123 Main St, Anytown',
    'phone': '(555) 123-4567',
    'openingHours': 'Mon-Sat: 11:00 AM - 10:00 PM',
    'description': 'Authentic Italian cuisine in a cozy atmosphere.',
    'imageUrl': '/images/italian.jpg',
}


@pytest.fixture(params=['database', 'memory'])
def app(request):
    """One app per test, run once against each storage backend."""
    storage = MemStorage() if request.param == 'memory' else None
    application = create_app(TestConfig, storage=storage)
    yield application
    if request.param == 'database':
        from restaurant_app.extensions import db
        with application.app_context():
            db.session.remove()
            db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def storage(app):
    with app.app_context():
        yield get_storage()


@pytest.fixture()
def create_user(app):
    """Create a user directly in storage and return its id."""
    def _create(username, password='password', is_admin=False):
        with app.app_context():
            user = get_storage().create_user({
                'username': username,
                'password_hash': make_password_hash(password),
                'is_admin': is_admin,
            })
            return user.id
    return _create


def login(client, username, password='password'):
    return client.post('/api/login', json={'username': username, 'password': password})


@pytest.fixture()
def admin_client(app, create_user):
    create_user('adminuser', 'adminpass', is_admin=True)
    c = app.test_client()
    r = login(c, 'adminuser', 'adminpass')
    assert r.status_code == 200
    return c


@pytest.fixture()
def user_client(app, create_user):
    create_user('alice', 'alicepass')
    c = app.test_client()
    r = login(c, 'alice', 'alicepass')
    assert r.status_code == 200
    return c


@pytest.fixture()
def restaurant_id(admin_client):
    r = admin_client.post('/api/restaurants', json=RESTAURANT)
    assert r.status_code == 201
    return r.get_json()['id']
