"""
Request guards shared by blueprints
"""

from flask import current_app, jsonify
from clearance.services import AuthService
from clearance.utils import AuthenticationError, AuthorizationError, create_response


def require_admin_token():
    """
    Reject the request unless it carries an admin token.

    Only enforced when ADMIN_TOKEN_REQUIRED is set. Returns an error response
    to short-circuit the request, or None to let it through.
    """
    if not current_app.config.get('ADMIN_TOKEN_REQUIRED'):
        return None

    try:
        AuthService.require_role('admin')
    except AuthenticationError as e:
        return jsonify(create_response(False, str(e))), 401
    except AuthorizationError as e:
        return jsonify(create_response(False, str(e))), 403
    return None
