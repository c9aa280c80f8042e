"""
Admin routes: student management, clearance status and messaging
"""

from flask import Blueprint, request, jsonify
from clearance.models import db
from clearance.routes.guards import require_admin_token
from clearance.services import ClearanceService, StudentService, NotificationService
from clearance.utils import (
    ValidationError, NotFoundError, log_error, create_response
)

admin_bp = Blueprint('admin', __name__)
admin_bp.before_request(require_admin_token)


@admin_bp.route('/dashboard', methods=['GET'])
def get_dashboard_stats():
    """Get dashboard statistics"""
    try:
        return jsonify(ClearanceService.get_dashboard_stats())
    except Exception as e:
        log_error("Dashboard stats error", e)
        return jsonify(create_response(False, "Failed to get dashboard statistics")), 500


@admin_bp.route('/students', methods=['GET'])
def get_students():
    """Get all students with optional search and status filter"""
    try:
        students = StudentService.list_students(
            search=request.args.get('search'),
            status=request.args.get('status')
        )
        return jsonify([student.to_dict() for student in students])
    except Exception as e:
        log_error("Get students error", e)
        return jsonify(create_response(False, "Failed to get students")), 500


@admin_bp.route('/students', methods=['POST'])
def add_student():
    """Add a new student with the default password"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify(create_response(False, "No data provided")), 400

        student = StudentService.add_student(data)
        return jsonify(student.to_dict()), 201

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except Exception as e:
        log_error("Add student error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to add student")), 500


@admin_bp.route('/students/bulk', methods=['POST'])
def add_bulk_students():
    """Add multiple students"""
    try:
        data = request.get_json(silent=True) or {}
        students = data.get('students')
        if not isinstance(students, list) or not students:
            return jsonify(create_response(False, "No students provided")), 400

        return jsonify(StudentService.add_bulk_students(students))

    except Exception as e:
        log_error("Bulk add students error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to add students")), 500


@admin_bp.route('/students/<student_id>/status', methods=['PUT'])
def update_student_status(student_id):
    """Update student clearance status"""
    try:
        data = request.get_json(silent=True) or {}
        student = ClearanceService.update_status(
            student_id,
            data.get('clearance_status'),
            data.get('notification_message')
        )
        return jsonify(student.to_dict())

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Update clearance status error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to update clearance status")), 500


@admin_bp.route('/students/<student_id>', methods=['DELETE'])
def delete_student(student_id):
    """Delete a student and their notifications"""
    try:
        StudentService.delete_student(student_id)
        return jsonify(create_response(True, "Student deleted successfully"))

    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Delete student error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to delete student")), 500


@admin_bp.route('/notifications', methods=['POST'])
def send_notification():
    """Send a notification to a student"""
    try:
        data = request.get_json(silent=True) or {}
        notification = NotificationService.send_to_student(
            data.get('student_id'), data.get('title'), data.get('message'),
            'message', extended_lookup=True
        )
        return jsonify(notification.to_dict()), 201

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Send notification error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to send notification")), 500
