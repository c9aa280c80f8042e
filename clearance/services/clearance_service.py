"""
Clearance status service
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple
from flask import current_app
from clearance.models import Student, DEPARTMENTS, commit_session
from clearance.services.evaluator import is_fully_cleared
from clearance.services.lookup import find_student, DEFAULT_LOOKUP_ORDER, EXTENDED_LOOKUP_ORDER
from clearance.services.notification_service import NotificationService
from clearance.templates.notification_templates import (
    STATUS_UPDATED_TITLE, CLEARANCE_COMPLETED_TITLE, CLEARANCE_COMPLETED_MESSAGE,
    get_status_update_message
)
from clearance.utils.validators import validate_status_update
from clearance.utils.helpers import log_info

# Completion notification rules
COMPLETION_FROM_NOTHING = 'from_nothing'
COMPLETION_ON_TRANSITION = 'on_transition'
COMPLETION_RULES = (COMPLETION_FROM_NOTHING, COMPLETION_ON_TRANSITION)


def diff_status(previous: Mapping[str, bool], update: Mapping[str, bool]) -> List[Tuple[str, bool]]:
    """
    List departments in update whose flag differs from previous

    Returns:
        (department, new_status) pairs in update order
    """
    return [
        (department, status)
        for department, status in update.items()
        if previous.get(department) != status
    ]


def should_notify_completion(previous: Mapping[str, bool], merged: Mapping[str, bool], rule: str) -> bool:
    """
    Decide whether a status update earns the completion notification

    Args:
        previous: Status before the update
        merged: Status after the update
        rule: 'from_nothing' fires only when nothing was cleared before and everything
            is cleared now; 'on_transition' fires whenever the student becomes fully cleared

    Returns:
        True if the completion notification should be created
    """
    if not is_fully_cleared(merged):
        return False
    if rule == COMPLETION_ON_TRANSITION:
        return not is_fully_cleared(previous)
    return not any(previous.get(department) for department in DEPARTMENTS)


class ClearanceService:
    """Clearance service class"""

    @staticmethod
    def update_status(lookup_key: str, clearance_status: Any,
                      notification_message: Optional[str] = None) -> Student:
        """
        Apply a partial clearance status update to a student

        Args:
            lookup_key: Student id, user id or email
            clearance_status: Departments to change, e.g. {'library': True}
            notification_message: Replaces the generated status update message

        Returns:
            The updated student

        Raises:
            NotFoundError: If no student matches the key
            ValidationError: If the update is malformed
            DatabaseError: If a write fails
            ValueError: If CLEARANCE_COMPLETION_RULE is not a known rule
        """
        update = validate_status_update(clearance_status, DEPARTMENTS)
        rule = current_app.config.get('CLEARANCE_COMPLETION_RULE', COMPLETION_FROM_NOTHING)
        if rule not in COMPLETION_RULES:
            raise ValueError(f"Unknown completion rule: {rule}")

        student = find_student(lookup_key, DEFAULT_LOOKUP_ORDER)
        previous = student.clearance_status

        student.clearance_status = update
        merged = student.clearance_status
        all_cleared = is_fully_cleared(merged)

        if all_cleared and not student.clearance_date:
            student.clearance_date = datetime.utcnow()
        elif not all_cleared and student.clearance_date:
            student.clearance_date = None

        commit_session("update clearance status")

        changes = diff_status(previous, update)
        if changes:
            NotificationService.create_notification(
                student,
                STATUS_UPDATED_TITLE,
                notification_message or get_status_update_message(changes),
                'message'
            )

        if should_notify_completion(previous, merged, rule):
            NotificationService.create_notification(
                student, CLEARANCE_COMPLETED_TITLE, CLEARANCE_COMPLETED_MESSAGE, 'clearance'
            )

        log_info(f"Clearance status updated for student {student.id}: {len(changes)} change(s)")
        return student

    @staticmethod
    def verify_certificate(lookup_key: str) -> Dict[str, Any]:
        """
        Verify a student's clearance certificate

        Args:
            lookup_key: Student id, user id, roll number or email

        Returns:
            Dictionary with the student, whether they are cleared and when this check ran
        """
        student = find_student(lookup_key, EXTENDED_LOOKUP_ORDER)
        return {
            'student': student.to_dict(),
            'isCleared': is_fully_cleared(student.clearance_status),
            'verificationDate': datetime.utcnow().isoformat()
        }

    @staticmethod
    def is_student_cleared(lookup_key: str) -> bool:
        """Check whether the student matching the key is fully cleared"""
        student = find_student(lookup_key, DEFAULT_LOOKUP_ORDER)
        return is_fully_cleared(student.clearance_status)

    @staticmethod
    def get_dashboard_stats() -> Dict[str, Any]:
        """Aggregate clearance counts across all students"""
        students = Student.query.all()
        total = len(students)
        cleared = sum(1 for student in students if is_fully_cleared(student.clearance_status))

        return {
            'totalStudents': total,
            'clearedStudents': cleared,
            'pendingStudents': total - cleared,
            'clearanceRate': int(cleared * 100 / total + 0.5) if total > 0 else 0,
            'lastUpdate': datetime.utcnow().isoformat()
        }
