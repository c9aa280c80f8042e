"""
Database models initialization
"""

from clearance.models.database import db, init_db, commit_session
from clearance.models.student import Student, Document, DEPARTMENTS
from clearance.models.notification import Notification, NOTIFICATION_TYPES
from clearance.models.admin import Admin

# Export all models
__all__ = [
    'db', 'init_db', 'commit_session',
    'Student', 'Document', 'DEPARTMENTS',
    'Notification', 'NOTIFICATION_TYPES', 'Admin'
]
