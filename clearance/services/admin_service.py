"""
Admin registry service
"""

from typing import Any, Dict, List
from clearance.models import db, Admin, commit_session
from clearance.utils.validators import validate_email, validate_required
from clearance.utils.exceptions import ValidationError, NotFoundError, AuthenticationError


class AdminService:
    """Admin service class"""

    @staticmethod
    def get_admin(admin_id: int) -> Admin:
        admin = db.session.get(Admin, admin_id)
        if admin is None:
            raise NotFoundError("Admin not found")
        return admin

    @staticmethod
    def list_admins() -> List[Admin]:
        return Admin.query.order_by(Admin.id).all()

    @staticmethod
    def create_admin(data: Dict[str, Any]) -> Admin:
        """
        Create an admin account

        Args:
            data: name, email and password

        Returns:
            The saved admin
        """
        name, email, password = data.get('name'), data.get('email'), data.get('password')
        if not name or not email or not password:
            raise ValidationError("Please provide name, email and password")

        email = email.strip().lower()
        if not validate_email(email):
            raise ValidationError("Invalid email format")
        if Admin.query.filter_by(email=email).first():
            raise ValidationError("Admin with this email already exists")

        admin = Admin(name=name.strip(), email=email, role='admin')
        admin.set_password(password)
        db.session.add(admin)
        commit_session("create admin")
        return admin

    @staticmethod
    def update_admin(admin_id: int, data: Dict[str, Any]) -> Admin:
        """Update an admin's name and/or email"""
        admin = AdminService.get_admin(admin_id)

        if data.get('name'):
            admin.name = data['name'].strip()
        if data.get('email'):
            email = data['email'].strip().lower()
            if not validate_email(email):
                raise ValidationError("Invalid email format")
            existing = Admin.query.filter_by(email=email).first()
            if existing and existing.id != admin.id:
                raise ValidationError("Admin with this email already exists")
            admin.email = email

        commit_session("update admin")
        return admin

    @staticmethod
    def update_password(admin_id: int, current_password: str, new_password: str) -> None:
        """
        Change an admin's password

        Raises:
            AuthenticationError: If the current password is wrong
        """
        validate_required(new_password, 'New password')
        admin = AdminService.get_admin(admin_id)
        if not current_password or not admin.check_password(current_password):
            raise AuthenticationError("Current password is incorrect")

        admin.set_password(new_password)
        commit_session("update admin password")

    @staticmethod
    def delete_admin(admin_id: int) -> None:
        admin = AdminService.get_admin(admin_id)
        db.session.delete(admin)
        commit_session("delete admin")
