"""
Utilities package initialization
"""

from clearance.utils.exceptions import (
    ClearanceException, ValidationError, NotFoundError, AuthenticationError,
    AuthorizationError, DatabaseError, StorageError, ApiError
)
from clearance.utils.validators import (
    validate_email, validate_password, validate_required,
    validate_department, validate_status_update, parse_timestamp
)
from clearance.utils.helpers import (
    setup_logging, log_error, log_warning, log_info, format_department_name,
    generate_user_id, create_response
)
from clearance.utils.cache import TTLCache

__all__ = [
    'ClearanceException', 'ValidationError', 'NotFoundError', 'AuthenticationError',
    'AuthorizationError', 'DatabaseError', 'StorageError', 'ApiError',
    'validate_email', 'validate_password', 'validate_required',
    'validate_department', 'validate_status_update', 'parse_timestamp',
    'setup_logging', 'log_error', 'log_warning', 'log_info', 'format_department_name',
    'generate_user_id', 'create_response', 'TTLCache'
]
