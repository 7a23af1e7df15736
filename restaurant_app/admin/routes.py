"""
Admin Routes

The dashboard summary is guarded by a role permission (admins always pass);
role management itself requires the admin flag.
"""

import logging

from flask import request, jsonify
from flask_login import current_user

from restaurant_app.admin import admin_bp
from restaurant_app.auth.decorators import admin_required, permission_required
from restaurant_app.errors import ValidationError
from restaurant_app.storage import get_storage
from restaurant_app.validation import parse_payload, ROLE_FIELDS, PERMISSION_FIELDS

logger = logging.getLogger(__name__)


@admin_bp.route('/dashboard', methods=['GET'])
@permission_required('read', 'dashboard')
def admin_dashboard():
    """Admin dashboard with system overview."""
    return jsonify({
        'username': current_user.username,
        'counts': get_storage().count_summary(),
    })


@admin_bp.route('/roles', methods=['POST'])
@admin_required
def create_role():
    """Create a role with its permission grants.

    Body: ``{"name": ..., "description": ..., "permissions": [{"action", "resource"}]}``
    """
    payload = request.get_json(silent=True)
    data = parse_payload(payload, ROLE_FIELDS, message='Invalid role data')

    raw_grants = payload.get('permissions', [])
    if not isinstance(raw_grants, list):
        raise ValidationError('Invalid role data',
                              [{'field': 'permissions', 'message': 'Expected a list'}])
    grants = [parse_payload(g, PERMISSION_FIELDS, message='Invalid permission data')
              for g in raw_grants]

    storage = get_storage()
    if any(r.name == data['name'] for r in storage.get_all_roles()):
        raise ValidationError('Role already exists')

    role = storage.create_role(data['name'], data.get('description'))
    for grant in grants:
        storage.grant_permission(role.id, grant['action'], grant['resource'])

    logger.info('Admin %s created role %s with %d permission(s)',
                current_user.username, role.name, len(grants))
    body = role.to_dict()
    body['permissions'] = grants
    return jsonify(body), 201
