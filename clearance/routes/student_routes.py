"""
Student routes
"""

from flask import Blueprint, request, jsonify
from clearance.models import db
from clearance.services import AuthService, StudentService, DocumentService, ClearanceService
from clearance.utils import (
    ValidationError, NotFoundError, AuthenticationError, log_error, create_response
)

student_bp = Blueprint('student', __name__)


@student_bp.route('/login', methods=['POST'])
def login_student():
    """Authenticate a student"""
    try:
        data = request.get_json(silent=True) or {}
        result = AuthService.authenticate_student(data.get('email'), data.get('password'))
        return jsonify(result)

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except AuthenticationError as e:
        return jsonify(create_response(False, str(e))), 401
    except Exception as e:
        log_error("Student login error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Login failed. Please try again.")), 500


@student_bp.route('', methods=['GET'])
def get_all_students():
    """Get all students"""
    try:
        students = StudentService.list_students()
        return jsonify([student.to_dict() for student in students])
    except Exception as e:
        log_error("Get students error", e)
        return jsonify(create_response(False, "Failed to get students")), 500


@student_bp.route('', methods=['POST'])
def create_student():
    """Create a new student"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify(create_response(False, "No data provided")), 400

        student = StudentService.create_student(data)
        return jsonify(student.to_dict()), 201

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except Exception as e:
        log_error("Create student error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to create student")), 500


@student_bp.route('/verify/<student_id>', methods=['GET'])
def verify_certificate(student_id):
    """Verify a student's certificate by id, user id, roll number or email"""
    try:
        return jsonify(ClearanceService.verify_certificate(student_id))
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Certificate verification error", e)
        return jsonify(create_response(False, "Failed to verify certificate")), 500


@student_bp.route('/<student_id>', methods=['GET'])
def get_student(student_id):
    """Get student by id, user id, roll number or email"""
    try:
        student = StudentService.get_student(student_id)
        return jsonify(student.to_dict())
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Get student error", e)
        return jsonify(create_response(False, "Failed to get student")), 500


@student_bp.route('/<student_id>/password', methods=['PUT'])
def update_password(student_id):
    """Update student password"""
    try:
        data = request.get_json(silent=True) or {}
        StudentService.update_password(student_id, data.get('newPassword'))
        return jsonify(create_response(True, "Password updated successfully"))

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Update student password error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to update password")), 500


@student_bp.route('/<student_id>/documents/<department>', methods=['PUT'])
def add_document(student_id, department):
    """Store uploaded document metadata for a department"""
    try:
        documents = DocumentService.add_document(student_id, department, request.get_json(silent=True))
        return jsonify(documents)

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Add document error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to save document")), 500


@student_bp.route('/<student_id>/documents/<department>/<document_id>', methods=['DELETE'])
def delete_document(student_id, department, document_id):
    """Delete a document from a department"""
    try:
        DocumentService.delete_document(student_id, department, document_id)
        return jsonify(create_response(True, "Document deleted successfully"))

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Delete document error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to delete document")), 500


@student_bp.route('/<student_id>/is-cleared', methods=['GET'])
def is_student_cleared(student_id):
    """Check if a student is fully cleared"""
    try:
        return jsonify({'isCleared': ClearanceService.is_student_cleared(student_id)})
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Clearance check error", e)
        return jsonify(create_response(False, "Failed to check clearance")), 500
