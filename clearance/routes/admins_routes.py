"""
Admin account routes
"""

from flask import Blueprint, request, jsonify
from clearance.models import db
from clearance.routes.guards import require_admin_token
from clearance.services import AdminService, AuthService
from clearance.utils import (
    ValidationError, NotFoundError, AuthenticationError, log_error, create_response
)

admins_bp = Blueprint('admins', __name__)


@admins_bp.before_request
def check_admin_token():
    if request.endpoint == 'admins.login_admin':
        return None
    return require_admin_token()


@admins_bp.route('/login', methods=['POST'])
def login_admin():
    """Admin login"""
    try:
        data = request.get_json(silent=True) or {}
        return jsonify(AuthService.authenticate_admin(data.get('email'), data.get('password')))

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except AuthenticationError as e:
        return jsonify(create_response(False, str(e))), 401
    except Exception as e:
        log_error("Admin login error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Login failed. Please try again.")), 500


@admins_bp.route('', methods=['GET'])
def get_all_admins():
    """Get all admins"""
    try:
        return jsonify([admin.to_dict() for admin in AdminService.list_admins()])
    except Exception as e:
        log_error("Get admins error", e)
        return jsonify(create_response(False, "Failed to get admins")), 500


@admins_bp.route('/<int:admin_id>', methods=['GET'])
def get_admin(admin_id):
    """Get admin by id"""
    try:
        return jsonify(AdminService.get_admin(admin_id).to_dict())
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Get admin error", e)
        return jsonify(create_response(False, "Failed to get admin")), 500


@admins_bp.route('', methods=['POST'])
def create_admin():
    """Create a new admin"""
    try:
        admin = AdminService.create_admin(request.get_json(silent=True) or {})
        return jsonify(admin.to_dict()), 201

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except Exception as e:
        log_error("Create admin error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to create admin")), 500


@admins_bp.route('/<int:admin_id>', methods=['PUT'])
def update_admin(admin_id):
    """Update admin name or email"""
    try:
        admin = AdminService.update_admin(admin_id, request.get_json(silent=True) or {})
        return jsonify(admin.to_dict())

    except ValidationError as e:
        db.session.rollback()
        return jsonify(create_response(False, str(e))), 400
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Update admin error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to update admin")), 500


@admins_bp.route('/<int:admin_id>/password', methods=['PUT'])
def update_admin_password(admin_id):
    """Update admin password"""
    try:
        data = request.get_json(silent=True) or {}
        AdminService.update_password(admin_id, data.get('currentPassword'), data.get('newPassword'))
        return jsonify(create_response(True, "Password updated successfully"))

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except AuthenticationError as e:
        return jsonify(create_response(False, str(e))), 401
    except Exception as e:
        log_error("Update admin password error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to update password")), 500


@admins_bp.route('/<int:admin_id>', methods=['DELETE'])
def delete_admin(admin_id):
    """Delete admin"""
    try:
        AdminService.delete_admin(admin_id)
        return jsonify(create_response(True, "Admin deleted successfully"))

    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Delete admin error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to delete admin")), 500
