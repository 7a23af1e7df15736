import pytest

from restaurant_app.services.passwords import hash_password, verify_password, MalformedHashError


@pytest.mark.parametrize('password', ['secret', 'pässwörd', 'a' * 200, ' spaced out '])
def test_verify_accepts_original_password(password):
    record = hash_password(password)
    assert verify_password(password, record) is True


def test_verify_rejects_wrong_password():
    record = hash_password('correct horse')
    assert verify_password('battery staple', record) is False
    assert verify_password('correct horse ', record) is False


def test_hash_uses_scrypt_and_random_salt():
    first = hash_password('same')
    second = hash_password('same')
    assert first.startswith('scrypt:')
    assert first != second
    assert first.split('$')[1] != second.split('$')[1]


def test_custom_method_round_trips():
    record = hash_password('pw', method='pbkdf2:sha256:1000')
    assert record.startswith('pbkdf2:sha256:1000$')
    assert verify_password('pw', record)


@pytest.mark.parametrize('record', [
    '',
    'no-separators',
    'scrypt$onlysalt',
    '$salt$abcdef',
    'scrypt:32768:8:1$$abcdef',
    'scrypt:32768:8:1$salt$not-hex!',
    None,
])
def test_malformed_record_raises(record):
    with pytest.raises(MalformedHashError):
        verify_password('anything', record)


@pytest.mark.parametrize('record', [
    'md5$salt$abcdef',
    'scrypt:lots:8:1$salt$abcdef',
])
def test_unknown_or_broken_method_raises(record):
    with pytest.raises(MalformedHashError):
        verify_password('anything', record)


def test_malformed_error_is_a_value_error():
    with pytest.raises(ValueError):
        verify_password('x', 'garbage')
