"""
Notification service
"""

from typing import List, Optional
from clearance.models import db, Notification, Student, NOTIFICATION_TYPES, commit_session
from clearance.services.evaluator import is_fully_cleared
from clearance.services.lookup import find_student, DEFAULT_LOOKUP_ORDER, EXTENDED_LOOKUP_ORDER
from clearance.templates.notification_templates import (
    CLEARANCE_COMPLETED_TITLE, CLEARANCE_COMPLETED_MESSAGE
)
from clearance.utils.validators import validate_required
from clearance.utils.exceptions import ValidationError, NotFoundError


class NotificationService:
    """Notification service class"""

    @staticmethod
    def create_notification(student: Optional[Student], title: str, message: str,
                            notification_type: Optional[str] = None) -> Notification:
        """
        Persist a notification for a student

        Args:
            student: Target student
            title: Notification title
            message: Notification body, may span several lines
            notification_type: 'message', 'clearance' or 'system'; defaults to 'message'

        Returns:
            The saved notification

        Raises:
            ValidationError: If the student, title or message is missing, or the type is unknown
            DatabaseError: If the write fails
        """
        if student is None:
            raise ValidationError("Student is required")
        validate_required(title, 'Title')
        validate_required(message, 'Message')

        notification_type = notification_type or 'message'
        if notification_type not in NOTIFICATION_TYPES:
            raise ValidationError(f"Invalid notification type: {notification_type}")

        notification = Notification(
            student_id=student.id,
            title=title,
            message=message,
            type=notification_type,
            is_read=False
        )
        db.session.add(notification)
        commit_session("save notification")
        return notification

    @staticmethod
    def send_to_student(lookup_key: str, title: str, message: str,
                        notification_type: Optional[str] = None, extended_lookup: bool = False) -> Notification:
        """
        Create a notification for the student matching a lookup key

        Args:
            lookup_key: Student id, user id or email (plus roll number with extended_lookup)
            title: Notification title
            message: Notification body
            notification_type: Notification category
            extended_lookup: Also match on roll number

        Returns:
            The saved notification
        """
        validate_required(lookup_key, 'Student ID')
        validate_required(title, 'Title')
        validate_required(message, 'Message')

        strategies = EXTENDED_LOOKUP_ORDER if extended_lookup else DEFAULT_LOOKUP_ORDER
        student = find_student(lookup_key, strategies)
        return NotificationService.create_notification(student, title, message, notification_type)

    @staticmethod
    def create_clearance_notification(lookup_key: str) -> Notification:
        """
        Create the clearance completed notification on demand

        Raises:
            ValidationError: If the student is not fully cleared yet
        """
        validate_required(lookup_key, 'Student ID')
        student = find_student(lookup_key, DEFAULT_LOOKUP_ORDER)
        if not is_fully_cleared(student.clearance_status):
            raise ValidationError("Student is not fully cleared yet")

        return NotificationService.create_notification(
            student, CLEARANCE_COMPLETED_TITLE, CLEARANCE_COMPLETED_MESSAGE, 'clearance'
        )

    @staticmethod
    def get_student_notifications(lookup_key: str) -> List[Notification]:
        """Get a student's notifications, newest first"""
        student = find_student(lookup_key, DEFAULT_LOOKUP_ORDER)
        return (Notification.query
                .filter_by(student_id=student.id)
                .order_by(Notification.created_at.desc(), Notification.id.desc())
                .all())

    @staticmethod
    def get_unread_count(lookup_key: str) -> int:
        student = find_student(lookup_key, DEFAULT_LOOKUP_ORDER)
        return Notification.query.filter_by(student_id=student.id, is_read=False).count()

    @staticmethod
    def mark_as_read(notification_id: int) -> Notification:
        notification = db.session.get(Notification, notification_id)
        if notification is None:
            raise NotFoundError("Notification not found")

        notification.is_read = True
        commit_session("mark notification as read")
        return notification

    @staticmethod
    def delete_notification(notification_id: int) -> None:
        notification = db.session.get(Notification, notification_id)
        if notification is None:
            raise NotFoundError("Notification not found")

        db.session.delete(notification)
        commit_session("delete notification")
