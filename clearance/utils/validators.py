"""
Validation utilities
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional
from clearance.utils.exceptions import ValidationError


def validate_email(email: str) -> bool:
    """
    Validate email format
    
    Args:
        email: Email to validate
        
    Returns:
        True if valid email
    """
    if not email or not isinstance(email, str):
        return False
    
    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return bool(re.match(pattern, email.strip()))


def validate_password(password: str) -> bool:
    """
    Validate password strength
    
    Args:
        password: Password to validate
        
    Returns:
        True if valid password
    """
    if not password or not isinstance(password, str):
        return False
    
    # At least 6 characters
    return len(password) >= 6


def validate_required(value: Any, field_name: str) -> None:
    """
    Validate required field
    
    Args:
        value: Value to validate
        field_name: Name of the field for error message
        
    Raises:
        ValidationError: If value is empty or None
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")


def validate_department(department: str, departments: Iterable[str]) -> None:
    """
    Validate a department key
    
    Args:
        department: Department key from the request
        departments: Allowed department keys
        
    Raises:
        ValidationError: If the department is unknown
    """
    if department not in departments:
        raise ValidationError("Invalid department")


def validate_status_update(status: Any, departments: Iterable[str]) -> Dict[str, bool]:
    """
    Validate a partial clearance status update
    
    Args:
        status: Mapping of department to flag from the request body
        departments: Allowed department keys
        
    Returns:
        The validated mapping
        
    Raises:
        ValidationError: If the mapping is missing, has unknown departments or non-boolean flags
    """
    if status is None:
        raise ValidationError("Clearance status is required")
    if not isinstance(status, dict):
        raise ValidationError("Clearance status must be an object")
    
    allowed = set(departments)
    unknown = sorted(key for key in status if key not in allowed)
    if unknown:
        raise ValidationError(f"Unknown departments: {', '.join(unknown)}")
    
    for department, value in status.items():
        if not isinstance(value, bool):
            raise ValidationError(f"Status for {department} must be true or false")
    
    return status


def parse_timestamp(value: Any, field_name: str) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp from request or import data

    Args:
        value: Timestamp string; a trailing Z is accepted
        field_name: Name of the field for error message

    Returns:
        Naive UTC datetime, or None if value is empty

    Raises:
        ValidationError: If value is not a valid timestamp
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError as e:
        raise ValidationError(f"{field_name} must be an ISO 8601 timestamp") from e
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
