"""
Request Payload Validation

Turns camelCase JSON bodies into dicts keyed by model attribute name.
Unknown keys are dropped; every problem found is reported at once.
"""

from restaurant_app.errors import ValidationError

MIN_RATING = 1
MAX_RATING = 5


def _text(value):
    if not isinstance(value, str):
        raise ValueError('Expected a string')
    if not value.strip():
        raise ValueError('Must not be empty')
    return value


def _username(value):
    # 'bob' and ' bob ' name the same account
    return _text(value).strip()


def _optional_text(value):
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError('Expected a string or null')
    return value


def _integer(value):
    # bool is an int subclass; true/false are not ids
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError('Expected an integer')
    return value


def _optional_integer(value):
    if value is None:
        return None
    return _integer(value)


def _boolean(value):
    if not isinstance(value, bool):
        raise ValueError('Expected a boolean')
    return value


def _rating(value):
    value = _integer(value)
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValueError(f'Rating must be between {MIN_RATING} and {MAX_RATING}')
    return value


_CONVERTERS = {
    'text': _text,
    'optional_text': _optional_text,
    'username': _username,
    'integer': _integer,
    'optional_integer': _optional_integer,
    'boolean': _boolean,
    'rating': _rating,
}


class Field:
    """One accepted key of a JSON payload."""

    def __init__(self, key, attr=None, kind='text', required=True):
        self.key = key
        self.attr = attr or key
        self.kind = kind
        self.required = required


RESTAURANT_FIELDS = (
    Field('name'),
    Field('cuisine'),
    Field('location'),
    Field('phone'),
    Field('openingHours', 'opening_hours'),
    Field('description', kind='optional_text', required=False),
    Field('imageUrl', 'image_url', kind='optional_text', required=False),
)

MENU_ITEM_FIELDS = (
    Field('restaurantId', 'restaurant_id', kind='integer'),
    Field('name'),
    Field('description', kind='optional_text', required=False),
    Field('price'),
    Field('category'),
    Field('imageUrl', 'image_url', kind='optional_text', required=False),
)

# userId defaults to the logged-in user, so it is optional on input
REVIEW_FIELDS = (
    Field('restaurantId', 'restaurant_id', kind='integer'),
    Field('userId', 'user_id', kind='integer', required=False),
    Field('rating', kind='rating'),
    Field('content'),
)

CREDENTIAL_FIELDS = (
    Field('username', kind='username'),
    Field('password'),
)

USER_FIELDS = CREDENTIAL_FIELDS + (
    Field('isAdmin', 'is_admin', kind='boolean', required=False),
    Field('roleId', 'role_id', kind='optional_integer', required=False),
)

ROLE_FIELDS = (
    Field('name'),
    Field('description', kind='optional_text', required=False),
)

PERMISSION_FIELDS = (
    Field('action'),
    Field('resource'),
)


def parse_payload(payload, fields, partial=False, message='Invalid request data'):
    """Validate ``payload`` against ``fields``.

    With ``partial=True`` missing required keys are allowed, which is how
    PUT/PATCH bodies are checked. Raises ValidationError listing each bad
    field.
    """
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object')

    data = {}
    errors = []
    for field in fields:
        if field.key not in payload:
            if field.required and not partial:
                errors.append({'field': field.key, 'message': 'Required'})
            continue
        try:
            data[field.attr] = _CONVERTERS[field.kind](payload[field.key])
        except ValueError as e:
            errors.append({'field': field.key, 'message': str(e)})

    if errors:
        raise ValidationError(message, errors)
    return data
