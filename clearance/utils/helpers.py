"""
Helper utilities
"""

import logging
import secrets
import time
from typing import Optional, Dict, Any
from flask import current_app


def setup_logging() -> None:
    """Setup application logging"""
    if not current_app.debug:
        # Production logging
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s %(levelname)s %(name)s %(message)s'
        )
    else:
        # Development logging
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s %(levelname)s %(name)s %(message)s'
        )


def log_error(message: str, exception: Optional[Exception] = None) -> None:
    """
    Log error message
    
    Args:
        message: Error message
        exception: Exception object
    """
    if exception:
        current_app.logger.error(f"{message}: {str(exception)}")
    else:
        current_app.logger.error(message)


def log_warning(message: str) -> None:
    """Log warning message"""
    current_app.logger.warning(message)


def log_info(message: str) -> None:
    """
    Log info message
    
    Args:
        message: Info message
    """
    current_app.logger.info(message)


def format_department_name(department: str) -> str:
    """
    Get display label for a department key
    
    Args:
        department: Department key, e.g. 'academic_department'
        
    Returns:
        Label such as 'Academic department'
    """
    label = department.replace('_', ' ')
    return label[:1].upper() + label[1:]


def generate_user_id() -> str:
    """Generate an external student id from the current time plus a random suffix"""
    return f"{int(time.time() * 1000)}{secrets.token_hex(3)[:5]}"


def create_response(success: bool, message: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Create standardized API response
    
    Args:
        success: Whether operation was successful
        message: Response message
        data: Optional data to include
        
    Returns:
        Standardized response dictionary
    """
    response = {
        'ok': success,
        'message': message
    }
    
    if data is not None:
        response['data'] = data
    
    return response
