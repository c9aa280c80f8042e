"""
Authentication service
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional
import jwt
from flask import current_app, request
from clearance.models import Student, Admin, commit_session
from clearance.utils.validators import validate_required
from clearance.utils.exceptions import AuthenticationError, AuthorizationError


class AuthService:
    """Authentication service class"""

    @staticmethod
    def issue_token(subject: int, role: str) -> str:
        """
        Issue a signed access token

        Args:
            subject: Student or admin id
            role: 'student' or 'admin'

        Returns:
            Encoded JWT
        """
        expires = datetime.utcnow() + timedelta(minutes=current_app.config['JWT_EXPIRES_MIN'])
        payload = {'sub': str(subject), 'role': role, 'exp': expires}
        return jwt.encode(payload, current_app.config['JWT_SECRET'], algorithm='HS256')

    @staticmethod
    def decode_token(token: str) -> Dict[str, Any]:
        """
        Decode and verify an access token

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        try:
            return jwt.decode(token, current_app.config['JWT_SECRET'], algorithms=['HS256'])
        except jwt.PyJWTError as e:
            raise AuthenticationError(f"Invalid token: {str(e)}") from e

    @staticmethod
    def get_bearer_token() -> Optional[str]:
        """Get the bearer token from the Authorization header"""
        auth = request.headers.get('Authorization', '')
        if auth.lower().startswith('bearer '):
            return auth.split(' ', 1)[1].strip() or None
        return None

    @staticmethod
    def require_role(role: str) -> Dict[str, Any]:
        """
        Require a valid token for the given role on the current request

        Returns:
            Token payload

        Raises:
            AuthenticationError: If no valid token is present
            AuthorizationError: If the token belongs to another role
        """
        token = AuthService.get_bearer_token()
        if not token:
            raise AuthenticationError("Access denied. No token provided.")

        payload = AuthService.decode_token(token)
        if payload.get('role') != role:
            raise AuthorizationError(f"Access denied. {role.title()} role required.")
        return payload

    @staticmethod
    def authenticate_student(email: str, password: str) -> Dict[str, Any]:
        """
        Authenticate a student

        Args:
            email: Student email
            password: Student password

        Returns:
            Dictionary with the student data and an access token
        """
        validate_required(email, 'Email')
        validate_required(password, 'Password')

        student = Student.query.filter_by(email=email.strip().lower()).first()
        if not student or not student.check_password(password):
            raise AuthenticationError("Invalid email or password")

        return {
            'success': True,
            'student': student.to_dict(),
            'token': AuthService.issue_token(student.id, 'student')
        }

    @staticmethod
    def authenticate_admin(email: str, password: str) -> Dict[str, Any]:
        """
        Authenticate an admin and record the login time

        Args:
            email: Admin email
            password: Admin password

        Returns:
            Dictionary with the admin data and an access token
        """
        validate_required(email, 'Email')
        validate_required(password, 'Password')

        admin = Admin.query.filter_by(email=email.strip().lower()).first()
        if not admin or not admin.check_password(password):
            raise AuthenticationError("Invalid email or password")

        admin.last_login = datetime.utcnow()
        commit_session("record admin login")

        return {
            'success': True,
            'admin': admin.to_dict(),
            'token': AuthService.issue_token(admin.id, 'admin')
        }
