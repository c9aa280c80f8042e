"""
Custom exceptions for the Clearance Tracker application
"""

class ClearanceException(Exception):
    """Base exception for Clearance Tracker application"""
    pass

class ValidationError(ClearanceException):
    """Validation error"""
    pass

class NotFoundError(ClearanceException):
    """Lookup matched no record"""
    pass

class AuthenticationError(ClearanceException):
    """Authentication error"""
    pass

class AuthorizationError(ClearanceException):
    """Authorization error"""
    pass

class DatabaseError(ClearanceException):
    """Database error"""
    pass

class StorageError(ClearanceException):
    """Object storage error"""
    pass

class ApiError(ClearanceException):
    """Non-success response from the clearance API"""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
