"""
Routes package initialization
"""

from clearance.routes.student_routes import student_bp
from clearance.routes.admin_routes import admin_bp
from clearance.routes.admins_routes import admins_bp
from clearance.routes.notification_routes import notification_bp

__all__ = ['student_bp', 'admin_bp', 'admins_bp', 'notification_bp']
