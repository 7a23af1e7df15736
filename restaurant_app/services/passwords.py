"""
Password Hashing Services

Thin layer over werkzeug's salted KDF helpers. Stored records use werkzeug's
``method$salt$hash`` layout, e.g. ``scrypt:32768:8:1$<salt>$<hex digest>``.
"""

import string

from werkzeug.security import generate_password_hash, check_password_hash

DEFAULT_METHOD = 'scrypt'
_HEX_DIGITS = set(string.hexdigits)


class MalformedHashError(ValueError):
    """Raised when a stored password record cannot be parsed."""


def hash_password(password, method=DEFAULT_METHOD):
    """Hash a plain-text password with a random salt."""
    return generate_password_hash(password, method=method)


def _split_record(record):
    if not isinstance(record, str):
        raise MalformedHashError('Password hash must be a string')
    parts = record.split('$', 2)
    if len(parts) != 3:
        raise MalformedHashError('Password hash must have the form method$salt$hash')
    method, salt, digest = parts
    if not method or not salt or not digest:
        raise MalformedHashError('Password hash has an empty component')
    if not set(digest) <= _HEX_DIGITS:
        raise MalformedHashError('Password hash digest is not hexadecimal')
    return method, salt, digest


def verify_password(password, record):
    """Check a candidate password against a stored hash record.

    Returns True or False for well-formed records. A record that cannot be
    parsed, or that names an unknown method, raises MalformedHashError.
    """
    _split_record(record)
    try:
        return check_password_hash(record, password)
    except ValueError as e:
        raise MalformedHashError(f'Unsupported password hash: {e}') from e
