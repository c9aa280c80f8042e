"""
Notification routes
"""

from flask import Blueprint, request, jsonify
from clearance.models import db
from clearance.services import NotificationService
from clearance.utils import ValidationError, NotFoundError, log_error, create_response

notification_bp = Blueprint('notification', __name__)


@notification_bp.route('/student/<student_id>', methods=['GET'])
def get_student_notifications(student_id):
    """Get all notifications for a student"""
    try:
        notifications = NotificationService.get_student_notifications(student_id)
        return jsonify([notif.to_dict() for notif in notifications])
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Get student notifications error", e)
        return jsonify(create_response(False, "Failed to get notifications")), 500


@notification_bp.route('/student/<student_id>/unread', methods=['GET'])
def get_unread_count(student_id):
    """Get unread notification count for a student"""
    try:
        return jsonify({'count': NotificationService.get_unread_count(student_id)})
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Unread count error", e)
        return jsonify(create_response(False, "Failed to count notifications")), 500


@notification_bp.route('', methods=['POST'])
def create_notification():
    """Create a new notification"""
    try:
        data = request.get_json(silent=True) or {}
        notification = NotificationService.send_to_student(
            data.get('student_id'), data.get('title'), data.get('message'), data.get('type')
        )
        return jsonify(notification.to_dict()), 201

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Create notification error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to create notification")), 500


@notification_bp.route('/clearance', methods=['POST'])
def create_clearance_notification():
    """Create a clearance completion notification"""
    try:
        data = request.get_json(silent=True) or {}
        notification = NotificationService.create_clearance_notification(data.get('student_id'))
        return jsonify(notification.to_dict()), 201

    except ValidationError as e:
        return jsonify(create_response(False, str(e))), 400
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Create clearance notification error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to create notification")), 500


@notification_bp.route('/<int:notification_id>/read', methods=['PUT'])
def mark_as_read(notification_id):
    """Mark a notification as read"""
    try:
        return jsonify(NotificationService.mark_as_read(notification_id).to_dict())
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Mark notification read error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to update notification")), 500


@notification_bp.route('/<int:notification_id>', methods=['DELETE'])
def delete_notification(notification_id):
    """Delete a notification"""
    try:
        NotificationService.delete_notification(notification_id)
        return jsonify(create_response(True, "Notification deleted successfully"))
    except NotFoundError as e:
        return jsonify(create_response(False, str(e))), 404
    except Exception as e:
        log_error("Delete notification error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Failed to delete notification")), 500
