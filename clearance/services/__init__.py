"""
Services package initialization
"""

from clearance.services.evaluator import is_fully_cleared
from clearance.services.lookup import (
    find_student, DEFAULT_LOOKUP_ORDER, EXTENDED_LOOKUP_ORDER
)
from clearance.services.notification_service import NotificationService
from clearance.services.clearance_service import ClearanceService
from clearance.services.storage_service import StorageService
from clearance.services.document_service import DocumentService
from clearance.services.student_service import StudentService
from clearance.services.admin_service import AdminService
from clearance.services.auth_service import AuthService
from clearance.services.api_client import ClearanceApiClient

__all__ = [
    'is_fully_cleared', 'find_student', 'DEFAULT_LOOKUP_ORDER', 'EXTENDED_LOOKUP_ORDER',
    'NotificationService', 'ClearanceService', 'StorageService', 'DocumentService',
    'StudentService', 'AdminService', 'AuthService', 'ClearanceApiClient'
]
